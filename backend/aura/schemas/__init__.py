"""
Aura Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from aura.schemas.market import (
    Timeframe,
    LifeEvent,
    OHLC,
    MarketSummary,
    MarketHistory,
    MarketRequest,
    ChecklistTask,
    IntradayMarket,
    IntradayRequest,
)
from aura.schemas.indicators import (
    IndicatorRequest,
    LinePoint,
    HistogramPoint,
    BollingerBands,
    MACDResult,
    IndicatorOverlay,
)
from aura.schemas.analysis import (
    Sentiment,
    AnalysisRequest,
    AnalysisResult,
)
from aura.schemas.session import (
    SessionCreate,
    SessionUpdate,
    SavedSession,
)

__all__ = [
    # Market
    "Timeframe",
    "LifeEvent",
    "OHLC",
    "MarketSummary",
    "MarketHistory",
    "MarketRequest",
    "ChecklistTask",
    "IntradayMarket",
    "IntradayRequest",
    # Indicators
    "IndicatorRequest",
    "LinePoint",
    "HistogramPoint",
    "BollingerBands",
    "MACDResult",
    "IndicatorOverlay",
    # Analysis
    "Sentiment",
    "AnalysisRequest",
    "AnalysisResult",
    # Sessions
    "SessionCreate",
    "SessionUpdate",
    "SavedSession",
]
