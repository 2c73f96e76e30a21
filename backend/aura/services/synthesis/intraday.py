"""
Intraday checklist market.

A single day charted as half-hour candles from midnight to the next
midnight (49 candles). Filled checklist tasks shape their bucket with the
linear event model. Before the first task and after the last the line is
flat; in between, seeded noise drifts the score with a slight pull back
toward the baseline.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Sequence

from aura.schemas.market import OHLC, ChecklistTask, IntradayMarket
from aura.services.synthesis.builder import clamp_score
from aura.services.synthesis.event_models import linear_event_candle
from aura.services.synthesis.noise import NoiseStream

logger = logging.getLogger(__name__)

INTERVAL_MINUTES = 30
MINUTES_PER_DAY = 24 * 60
CANDLE_COUNT = MINUTES_PER_DAY // INTERVAL_MINUTES + 1

INTRADAY_BASELINE = 50.0
INTRADAY_SEED = 12345
INTRADAY_VOLATILITY = 0.5
MEAN_REVERSION = 0.02  # share of the gap to the baseline closed per candle


def scheduled_tasks(tasks: Sequence[ChecklistTask]) -> list[ChecklistTask]:
    """Filled tasks that have a time, earliest first."""
    return sorted(
        (t for t in tasks if t.filled and t.time),
        key=lambda t: t.minute_of_day,
    )


def build_intraday_series(
    tasks: Sequence[ChecklistTask], day: date
) -> list[OHLC]:
    """
    Build the half-hour candles of one checklist day.

    Args:
        tasks: Checklist in any order; unfilled or untimed tasks are ignored
        day: Calendar day (UTC) the candles are keyed on

    Returns:
        49 contiguous candles starting at 00:00 UTC of `day`
    """
    active = scheduled_tasks(tasks)
    events = [(t.minute_of_day, t.to_event(day)) for t in active]

    first_minute = events[0][0] if events else MINUTES_PER_DAY
    last_minute = events[-1][0] if events else 0

    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    noise = NoiseStream(INTRADAY_SEED)
    current = INTRADAY_BASELINE
    cursor = 0
    candles: list[OHLC] = []

    for i in range(CANDLE_COUNT):
        bucket_start = i * INTERVAL_MINUTES
        bucket_end = bucket_start + INTERVAL_MINUTES

        bucket_events = []
        while cursor < len(events) and events[cursor][0] < bucket_end:
            bucket_events.append(events[cursor][1])
            cursor += 1

        open_ = close = high = low = current
        volume = 0.0

        if bucket_events:
            for event in bucket_events:
                shape = linear_event_candle(event, close)
                high = max(high, shape.high)
                low = min(low, shape.low)
                close = shape.close
                volume += shape.volume
            high = max(high, close)
            low = min(low, close)
        elif first_minute <= bucket_start <= last_minute:
            rand, noise = noise.draw()
            pull = (INTRADAY_BASELINE - open_) * MEAN_REVERSION
            close = open_ + (rand - 0.5) * INTRADAY_VOLATILITY + pull

            rand, noise = noise.draw()
            wick = rand * (INTRADAY_VOLATILITY * 0.5)
            high = max(open_, close) + wick
            low = min(open_, close) - wick

            rand, noise = noise.draw()
            volume = float(int(rand * 5))

        candles.append(
            OHLC(
                time=int((midnight + timedelta(minutes=bucket_start)).timestamp()),
                open=round(clamp_score(open_), 2),
                high=round(clamp_score(high), 2),
                low=round(clamp_score(low), 2),
                close=round(clamp_score(close), 2),
                volume=volume,
                is_event=bool(bucket_events),
                event_name=", ".join(e.name for e in bucket_events) or None,
            )
        )
        current = clamp_score(close)

    logger.debug(f"Built {len(candles)} intraday candles from {len(active)} tasks")
    return candles


def generate_intraday_market(
    tasks: Sequence[ChecklistTask], day: Optional[date] = None
) -> IntradayMarket:
    """Intraday candles plus the day's change against the baseline."""
    if day is None:
        day = datetime.now(timezone.utc).date()

    history = build_intraday_series(tasks, day)
    close = history[-1].close
    change = (close - INTRADAY_BASELINE) / INTRADAY_BASELINE * 100

    return IntradayMarket(
        day=day,
        history=history,
        baseline=INTRADAY_BASELINE,
        close=close,
        change_percent=round(change, 2),
    )
