"""
Market Synthesis Service

CONTRACT:
    Input:  MarketRequest (initial score, LifeEvents, Timeframe)
    Output: MarketHistory

RESPONSIBILITIES:
    - Build the hourly master series from events and seeded noise
    - Aggregate it into 4H / 1D candles
    - Summarize the session (OHLCV, ROE, liquidation risk)
    - Name the covered period
    - Chart a single checklist day in half-hour candles

PURE PYTHON - no I/O, no global RNG.
All math is deterministic and reproducible.
"""

from aura.services.synthesis.intraday import generate_intraday_market
from aura.services.synthesis.interface import MarketSynthesisServiceInterface
from aura.services.synthesis.service import (
    MarketSynthesisService,
    generate_market_history,
    get_synthesis_service,
)

__all__ = [
    "MarketSynthesisServiceInterface",
    "MarketSynthesisService",
    "generate_market_history",
    "generate_intraday_market",
    "get_synthesis_service",
]
