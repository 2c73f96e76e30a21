"""
CONTRACT 4: Session Store

Saved sessions are plain data: a name, a starting score and the events.
The store is a collaborator of the synthesis core, never called by it.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from aura.schemas.market import LifeEvent


class SessionCreate(BaseModel):
    """Payload for saving a new session."""

    name: str = Field(..., min_length=1, max_length=200)
    initial_score: float = Field(default=50.0)
    events: list[LifeEvent] = Field(default_factory=list)


class SessionUpdate(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    initial_score: Optional[float] = None
    events: Optional[list[LifeEvent]] = None


class SavedSession(BaseModel):
    """A stored session as returned by the store."""

    id: str
    name: str
    initial_score: float
    events: list[LifeEvent]
    created_at: datetime
    updated_at: datetime
