"""
Session store.

Saved sessions are the only persisted data of the app; the real store is
an external collaborator. This module defines its contract and an
in-memory implementation used by the API and the tests. The synthesis
core never touches it: callers load a session and hand its events over.
"""

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from aura.core.config import get_settings
from aura.schemas.session import SavedSession, SessionCreate, SessionUpdate
from aura.services.base import SessionNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class SessionStore(ABC):
    """Create/read/update/delete saved sessions by opaque id."""

    @abstractmethod
    def create(self, data: SessionCreate) -> SavedSession:
        pass

    @abstractmethod
    def get(self, session_id: str) -> SavedSession:
        """Raises SessionNotFoundError for unknown ids."""
        pass

    @abstractmethod
    def list_all(self) -> list[SavedSession]:
        """All sessions, newest first."""
        pass

    @abstractmethod
    def update(self, session_id: str, data: SessionUpdate) -> SavedSession:
        pass

    @abstractmethod
    def delete(self, session_id: str) -> None:
        pass


class InMemorySessionStore(SessionStore):
    """Dict-backed store. Thread safe; contents die with the process."""

    def __init__(self, max_sessions: int = 1000):
        self._sessions: dict[str, SavedSession] = {}
        self._lock = threading.Lock()
        self._max_sessions = max_sessions

    def create(self, data: SessionCreate) -> SavedSession:
        now = datetime.now(timezone.utc)
        session = SavedSession(
            id=uuid4().hex,
            name=data.name,
            initial_score=data.initial_score,
            events=list(data.events),
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            if len(self._sessions) >= self._max_sessions:
                raise ValidationError(
                    "SessionStore",
                    f"Session limit reached ({self._max_sessions})",
                )
            self._sessions[session.id] = session

        logger.info(f"Created session {session.id} ({len(session.events)} events)")
        return session

    def get(self, session_id: str) -> SavedSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def list_all(self) -> list[SavedSession]:
        with self._lock:
            # Insertion order breaks created_at ties
            sessions = list(reversed(self._sessions.values()))
        return sorted(sessions, key=lambda s: s.created_at, reverse=True)

    def update(self, session_id: str, data: SessionUpdate) -> SavedSession:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if data.events is not None:
            changes["events"] = list(data.events)

        with self._lock:
            current = self._sessions.get(session_id)
            if current is None:
                raise SessionNotFoundError(session_id)
            updated = current.model_copy(
                update={**changes, "updated_at": datetime.now(timezone.utc)}
            )
            self._sessions[session_id] = updated

        logger.info(f"Updated session {session_id}: {sorted(changes)}")
        return updated

    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(session_id)
        logger.info(f"Deleted session {session_id}")


# Singleton instance
_store_instance: Optional[InMemorySessionStore] = None


def get_session_store() -> InMemorySessionStore:
    """Get or create the process-wide session store."""
    global _store_instance
    if _store_instance is None:
        _store_instance = InMemorySessionStore(get_settings().max_sessions)
    return _store_instance
