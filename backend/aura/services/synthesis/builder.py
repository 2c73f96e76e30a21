"""
Hourly master series builder.

Walks the padded event range one hour at a time. Hours that contain
events are shaped by the event model; every other hour is seeded noise.
The result is the single source of truth for every timeframe and for the
session summary.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from aura.core.config import SynthesisConfig
from aura.schemas.market import LifeEvent, OHLC
from aura.services.synthesis.event_models import get_event_model
from aura.services.synthesis.noise import NoiseStream

logger = logging.getLogger(__name__)

ONE_HOUR = timedelta(hours=1)
SCORE_MIN = 0.0
SCORE_MAX = 100.0


def clamp_score(value: float) -> float:
    """Clamp a value into the 0-100 score domain."""
    return min(SCORE_MAX, max(SCORE_MIN, value))


def sort_events(events: Sequence[LifeEvent]) -> list[LifeEvent]:
    """Events by date, oldest first. Stable for equal timestamps."""
    return sorted(events, key=lambda e: e.timestamp)


def resolve_range(
    events: Sequence[LifeEvent],
    now: datetime,
    config: SynthesisConfig,
) -> tuple[datetime, datetime]:
    """
    Padded [start, end] of the master series.

    The active range is first..last event, or the lookback window ending
    at `now` when there are no events. Both ends are padded, the start is
    moved up so the range never exceeds `max_span_hours`, then floored to
    the top of the hour.
    """
    if events:
        start, end = events[0].date, events[-1].date
    else:
        end = now
        start = now - timedelta(days=config.default_lookback_days)

    padding = timedelta(hours=config.padding_hours)
    start = (start - padding).astimezone(timezone.utc)
    end = (end + padding).astimezone(timezone.utc)

    max_span = timedelta(hours=config.max_span_hours)
    if end - start > max_span:
        logger.warning(
            f"Range {start.isoformat()} .. {end.isoformat()} exceeds "
            f"{config.max_span_hours}h, keeping the most recent part"
        )
        start = end - max_span

    return start.replace(minute=0, second=0, microsecond=0), end


def build_hourly_series(
    initial_score: float,
    events: Sequence[LifeEvent],
    now: Optional[datetime] = None,
    config: Optional[SynthesisConfig] = None,
) -> list[OHLC]:
    """
    Build the hourly master OHLC series.

    Args:
        initial_score: Score the series opens at
        events: Life events in any order
        now: Clock used when there are no events (defaults to UTC now)
        config: Engine knobs (defaults to the canonical constants)

    Returns:
        Contiguous hourly candles covering the padded range
    """
    config = config or SynthesisConfig()
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    sorted_events = sort_events(events)
    event_model = get_event_model(config.event_model)
    volatility = config.hourly_volatility

    start, end = resolve_range(sorted_events, now, config)

    candles: list[OHLC] = []
    current_score = initial_score
    noise = NoiseStream(initial_score + len(events))
    bucket_start = start
    cursor = 0

    while bucket_start <= end:
        bucket_end = bucket_start + ONE_HOUR
        start_ts = bucket_start.timestamp()
        end_ts = bucket_end.timestamp()

        # Events are sorted, so a single cursor finds each bucket's members
        while cursor < len(sorted_events) and sorted_events[cursor].timestamp < start_ts:
            cursor += 1
        bucket_events = []
        while cursor < len(sorted_events) and sorted_events[cursor].timestamp < end_ts:
            bucket_events.append(sorted_events[cursor])
            cursor += 1

        open_ = current_score
        close = high = low = current_score
        volume = 0.0
        event_name = None

        if bucket_events:
            event_name = ", ".join(e.name for e in bucket_events)

            for event in bucket_events:
                shape = event_model(event, close)
                high = max(high, shape.high)
                low = min(low, shape.low)
                close = shape.close
                volume += shape.volume

            # H/L must encompass the final close
            high = max(high, close)
            low = min(low, close)
        else:
            rand, noise = noise.draw()
            close = open_ + (rand - 0.5) * volatility

            rand, noise = noise.draw()
            wick = rand * (volatility * 0.5)
            high = max(open_, close) + wick
            low = min(open_, close) - wick

            rand, noise = noise.draw()
            volume = float(int(rand * 5))

        candle = OHLC(
            time=int(start_ts),
            open=round(clamp_score(open_), 2),
            high=round(clamp_score(high), 2),
            low=round(clamp_score(low), 2),
            close=round(clamp_score(close), 2),
            volume=volume,
            is_event=bool(bucket_events),
            event_name=event_name,
        )
        candles.append(candle)

        current_score = clamp_score(close)
        bucket_start = bucket_end

    logger.debug(
        f"Built {len(candles)} hourly candles from {len(sorted_events)} events "
        f"({start.isoformat()} .. {end.isoformat()})"
    )
    return candles
