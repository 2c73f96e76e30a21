"""Candle and event factories shared by the tests."""

from datetime import datetime, timezone

from aura.schemas.market import LifeEvent, OHLC

NOW = datetime(2024, 6, 15, 12, 30, tzinfo=timezone.utc)


def make_event(name, when, impact=5, intensity=5, stickiness=0.5):
    return LifeEvent(
        name=name,
        date=when,
        impact=impact,
        intensity=intensity,
        stickiness=stickiness,
    )


def make_candles(closes, start=1_700_000_000, step=3600, volume=0, spread=0.5):
    """Up/down candles whose open is the previous close."""
    candles = []
    prev = closes[0]
    for i, close in enumerate(closes):
        open_ = prev
        candles.append(
            OHLC(
                time=start + i * step,
                open=open_,
                high=max(open_, close) + spread,
                low=min(open_, close) - spread,
                close=close,
                volume=volume,
            )
        )
        prev = close
    return candles


def assert_ohlc_invariant(candles):
    for c in candles:
        assert 0 <= c.low <= min(c.open, c.close), c
        assert max(c.open, c.close) <= c.high <= 100, c
