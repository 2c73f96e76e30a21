"""
Session Store

Contract and in-memory implementation of the saved-session collaborator.
"""

from aura.services.sessions.store import (
    InMemorySessionStore,
    SessionStore,
    get_session_store,
)

__all__ = [
    "SessionStore",
    "InMemorySessionStore",
    "get_session_store",
]
