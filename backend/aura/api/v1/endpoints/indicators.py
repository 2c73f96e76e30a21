"""
Indicator API Endpoints

Endpoints for technical indicator calculations over a candle series.
"""

from fastapi import APIRouter

from aura.schemas.indicators import (
    BollingerBands,
    IndicatorOverlay,
    IndicatorRequest,
    LinePoint,
    MACDResult,
)
from aura.services.indicators import get_indicator_service

router = APIRouter()


@router.post("/overlay", response_model=IndicatorOverlay)
async def get_overlay(request: IndicatorRequest):
    """
    Everything the chart draws: EMA (default 20), Bollinger Bands (20, 2),
    RSI (14) and MACD (12, 26, 9).
    """
    return get_indicator_service().execute(request)


@router.post("/ema", response_model=list[LinePoint])
async def get_ema(request: IndicatorRequest):
    """Exponential moving average (default period 20)."""
    return get_indicator_service().ema(request.history, request.period or 20)


@router.post("/rsi", response_model=list[LinePoint])
async def get_rsi(request: IndicatorRequest):
    """Relative Strength Index (default period 14)."""
    return get_indicator_service().rsi(request.history, request.period or 14)


@router.post("/bollinger", response_model=BollingerBands)
async def get_bollinger(request: IndicatorRequest):
    """Bollinger Bands (default period 20, 2 standard deviations)."""
    return get_indicator_service().bollinger(
        request.history, request.period or 20, request.std_dev
    )


@router.post("/macd", response_model=MACDResult)
async def get_macd(request: IndicatorRequest):
    """MACD (12, 26, 9). `period` is ignored."""
    return get_indicator_service().macd(request.history)
