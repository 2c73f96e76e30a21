"""
Market API Endpoints

Synthesize a market from life events and read its sentiment.
"""

from fastapi import APIRouter

from aura.schemas.analysis import AnalysisRequest, AnalysisResult
from aura.schemas.market import (
    IntradayMarket,
    IntradayRequest,
    MarketHistory,
    MarketRequest,
)
from aura.services.analysis import get_analysis_service
from aura.services.synthesis import get_synthesis_service

router = APIRouter()


@router.post("/history", response_model=MarketHistory)
async def generate_history(request: MarketRequest):
    """
    Synthesize candles for a list of life events.

    Returns:
        - history: candles at the requested timeframe (1H, 4H, 1D)
        - summary: session OHLCV, ROE and liquidation flag (timeframe independent)
        - periodName: label of the covered period
    """
    service = get_synthesis_service()
    return service.execute(request)


@router.post("/intraday", response_model=IntradayMarket)
async def generate_intraday(request: IntradayRequest):
    """
    Half-hour market of a single checklist day.

    Only filled tasks with an HH:MM time move the line; the result carries
    the close and its change against the 50 baseline (changePercent).
    """
    service = get_synthesis_service()
    return service.intraday(request.tasks, request.day)


@router.post("/analysis", response_model=AnalysisResult)
async def analyze_history(request: AnalysisRequest):
    """
    Technical read of a candle series.

    Short series (< 5 candles) return a neutral, zero-confidence result.
    """
    service = get_analysis_service()
    return service.execute(request)
