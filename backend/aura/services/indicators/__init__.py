"""
Indicator Engine Service

CONTRACT:
    Input:  IndicatorRequest (OHLC candles)
    Output: IndicatorOverlay

RESPONSIBILITIES:
    - EMA, RSI, Bollinger Bands and MACD over any candle series
    - Keep every output point keyed by its candle's time

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from aura.services.indicators.interface import IndicatorServiceInterface
from aura.services.indicators.service import (
    IndicatorService,
    calculate_bollinger,
    calculate_ema,
    calculate_macd,
    calculate_rsi,
    get_indicator_service,
)

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "calculate_ema",
    "calculate_rsi",
    "calculate_bollinger",
    "calculate_macd",
    "get_indicator_service",
]
