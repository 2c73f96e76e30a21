"""
Session API Endpoints

CRUD for saved sessions plus on-demand regeneration of their market.
"""

import logging

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel

from aura.schemas.analysis import AnalysisResult
from aura.schemas.market import MarketHistory, Timeframe
from aura.schemas.session import SavedSession, SessionCreate, SessionUpdate
from aura.services.analysis import get_analysis_service
from aura.services.base import SessionNotFoundError, ValidationError
from aura.services.sessions import get_session_store
from aura.services.synthesis import get_synthesis_service

logger = logging.getLogger(__name__)

router = APIRouter()


class SessionMarketResponse(BaseModel):
    """A saved session's market and its analysis."""

    session: SavedSession
    market: MarketHistory
    analysis: AnalysisResult


@router.get("", response_model=list[SavedSession])
async def list_sessions():
    """All saved sessions, newest first."""
    return get_session_store().list_all()


@router.post("", response_model=SavedSession, status_code=201)
async def create_session(request: SessionCreate):
    """Save a new session."""
    try:
        return get_session_store().create(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("/{session_id}", response_model=SavedSession)
async def get_session(session_id: str):
    """Get a saved session."""
    try:
        return get_session_store().get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.put("/{session_id}", response_model=SavedSession)
async def update_session(session_id: str, request: SessionUpdate):
    """Update name, score or events of a saved session."""
    try:
        return get_session_store().update(session_id, request)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str):
    """Delete a saved session."""
    try:
        get_session_store().delete(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=204)


@router.get("/{session_id}/market", response_model=SessionMarketResponse)
async def get_session_market(session_id: str, timeframe: Timeframe = Timeframe.D1):
    """
    Regenerate a saved session's market at the requested timeframe.

    The summary is identical for every timeframe; only the candles change.
    """
    try:
        session = get_session_store().get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    logger.debug(f"Regenerating market for session {session_id} at {timeframe.value}")
    market = get_synthesis_service().generate(
        session.initial_score, session.events, timeframe
    )
    analysis = get_analysis_service().analyze(market.history)

    return SessionMarketResponse(session=session, market=market, analysis=analysis)
