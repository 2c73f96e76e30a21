"""
Service Contract

Synthesis, indicator and analysis services share this shape: a typed
request model in, a typed result model out, no I/O in between.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """
    Base class for the engine services.

    A service is synchronous and stateless apart from its configuration,
    so the same request always yields the same result.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name used in log lines and errors."""
        pass

    @abstractmethod
    def execute(self, input_data: InputT) -> OutputT:
        """
        Run the service on a validated request.

        Args:
            input_data: Request model (pydantic has already validated it)

        Returns:
            Result model
        """
        pass

    def health_check(self) -> bool:
        return True


class ServiceError(Exception):
    """Base exception for errors raised outside the pure core."""

    def __init__(self, service_name: str, message: str, details: dict = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")


class ValidationError(ServiceError):
    """Request is well-formed but cannot be served (e.g. store is full)."""
    pass


class SessionNotFoundError(ServiceError):
    """No saved session with the requested id."""

    def __init__(self, session_id: str):
        super().__init__(
            "SessionStore",
            f"Session not found: {session_id}",
            {"session_id": session_id},
        )
        self.session_id = session_id
