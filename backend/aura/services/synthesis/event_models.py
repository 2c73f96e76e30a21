"""
Event impact models.

An event model turns one LifeEvent into a candle shape relative to the
running score. Two models are available:

    linear  spike = impact * intensity / 5 (wick only),
            move  = impact * stickiness (shifts the close)
    necm    Non-linear Event Candle Model: body grows with |impact|^1.5,
            wicks with intensity^2, and sell-offs get a longer lower wick.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable

from aura.schemas.market import LifeEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventCandle:
    """Shape of one event applied on top of `open`."""

    open: float
    high: float
    low: float
    close: float
    volume: float


EventModel = Callable[[LifeEvent, float], EventCandle]


def linear_event_candle(event: LifeEvent, base: float) -> EventCandle:
    """Transient spike on the wick, sticky part on the close."""
    spike = event.impact * (event.intensity / 5)
    peak = base + spike
    close = base + event.impact * event.stickiness

    return EventCandle(
        open=base,
        high=max(base, peak, close),
        low=min(base, peak, close),
        close=close,
        volume=event.intensity * 10,
    )


# NECM calibration
NECM_BODY_K = 0.15  # max body displacement, fraction of price
NECM_WICK_LAMBDA = 0.08  # max wick extension, fraction of price


def necm_event_candle(event: LifeEvent, base: float) -> EventCandle:
    """Non-linear Event Candle Model."""
    i = max(min(event.impact / 10.0, 1.0), -1.0)
    n = max(min(event.intensity / 10.0, 1.0), 0.0)
    s = max(min(event.stickiness, 1.0), 0.0)

    sign = 1 if i >= 0 else -1
    delta = base * sign * math.pow(abs(i), 1.5) * math.pow(s, 1.2) * NECM_BODY_K
    sigma = base * math.pow(n, 2) * math.sqrt(s) * NECM_WICK_LAMBDA

    # Panic factor: negative shocks stretch the lower wick
    skew = 1 + max(0.0, -i) * n

    close = base + delta
    high = max(base, close) + sigma * (1 - 0.2 * max(0.0, -i))
    low = min(base, close) - sigma * skew

    return EventCandle(
        open=base,
        high=high,
        low=low,
        close=close,
        volume=event.intensity * 10,
    )


EVENT_MODELS: dict[str, EventModel] = {
    "linear": linear_event_candle,
    "necm": necm_event_candle,
}


def get_event_model(name: str) -> EventModel:
    """Look up an event model by name; unknown names fall back to linear."""
    model = EVENT_MODELS.get(name.lower())
    if model is None:
        logger.warning(f"Unknown event model {name!r}, using linear")
        return linear_event_candle
    return model
