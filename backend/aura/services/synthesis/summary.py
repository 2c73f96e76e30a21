"""
Session summary and period naming.

The summary is always taken from the hourly master series so it stays the
same whichever timeframe is on screen.
"""

from datetime import timezone
from typing import Sequence

from aura.core.config import SynthesisConfig
from aura.schemas.market import LifeEvent, MarketSummary, OHLC
from aura.services.synthesis.builder import sort_events

DEFAULT_PERIOD_NAME = "Intraday Session"


def summarize(
    initial_score: float,
    master: Sequence[OHLC],
    liquidation_threshold: float = SynthesisConfig.liquidation_threshold,
) -> MarketSummary:
    """
    Session-level OHLCV, ROE and liquidation flag.

    ROE is (close - open) / open in percent, 0 when open is 0.
    """
    high = initial_score
    low = initial_score
    volume = 0.0
    for candle in master:
        high = max(high, candle.high)
        low = min(low, candle.low)
        volume += candle.volume

    close = master[-1].close if master else initial_score
    roe = 0.0 if initial_score == 0 else (close - initial_score) / initial_score * 100

    return MarketSummary(
        open=round(initial_score, 2),
        high=round(high, 2),
        low=round(low, 2),
        close=round(close, 2),
        volume=round(volume, 2),
        roe=round(roe, 2),
        is_liquidation_risk=low <= liquidation_threshold,
    )


def _short_date(value) -> str:
    return f"{value:%b} {value.day}"


def period_name(events: Sequence[LifeEvent]) -> str:
    """
    Human label for the covered period.

    "Mar 3, 2024" when all events share a day, "Mar 3 - Mar 9, 2024"
    otherwise (year of the last event). Dates are read in UTC, the same
    clock the candles are bucketed on.
    """
    if not events:
        return DEFAULT_PERIOD_NAME

    ordered = sort_events(events)
    first = ordered[0].date.astimezone(timezone.utc)
    last = ordered[-1].date.astimezone(timezone.utc)
    start_label, end_label = _short_date(first), _short_date(last)

    if start_label == end_label:
        return f"{start_label}, {last.year}"
    return f"{start_label} - {end_label}, {last.year}"
