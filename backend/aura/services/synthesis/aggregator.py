"""
Timeframe aggregation.

Folds the hourly master series into 4H or 1D candles. Buckets are fixed
offsets from the first master candle (not calendar aligned); the last
bucket may be short. Nothing is padded or dropped.
"""

from datetime import datetime, timezone
from typing import Sequence

from aura.schemas.market import OHLC, Timeframe


def format_date_label(timestamp: int) -> str:
    """Unix seconds -> YYYY-MM-DD (UTC)."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")


def merge_candles(bucket: Sequence[OHLC], timeframe: Timeframe) -> OHLC:
    """Merge consecutive candles into one."""
    first, last = bucket[0], bucket[-1]

    event_names = [c.event_name for c in bucket if c.is_event and c.event_name]
    is_event = any(c.is_event for c in bucket)

    time = first.time
    if timeframe == Timeframe.D1 and isinstance(time, int):
        time = format_date_label(time)

    return OHLC(
        time=time,
        open=first.open,
        high=max(c.high for c in bucket),
        low=min(c.low for c in bucket),
        close=last.close,
        volume=sum(c.volume for c in bucket),
        is_event=is_event,
        event_name=", ".join(event_names) if is_event else None,
    )


def aggregate(master: Sequence[OHLC], timeframe: Timeframe) -> list[OHLC]:
    """
    Aggregate hourly candles into the requested timeframe.

    1H returns the master series as-is.
    """
    timeframe = Timeframe(timeframe)
    if timeframe == Timeframe.H1:
        return list(master)

    size = timeframe.bucket_hours
    return [
        merge_candles(master[i : i + size], timeframe)
        for i in range(0, len(master), size)
    ]
