"""Hourly master series: range, noise, event shaping and clamping."""

from datetime import datetime, timedelta, timezone

import pytest

from aura.core.config import SynthesisConfig
from aura.schemas.market import EARLIEST_EVENT_DATE, LATEST_EVENT_DATE, LifeEvent
from aura.services.synthesis import generate_market_history
from aura.services.synthesis.builder import build_hourly_series, resolve_range
from aura.services.synthesis.event_models import (
    get_event_model,
    linear_event_candle,
    necm_event_candle,
)
from tests.helpers import assert_ohlc_invariant, make_event


def _ts(dt):
    return int(dt.timestamp())


def test_no_events_covers_lookback_plus_padding(now):
    candles = build_hourly_series(50, [], now=now)

    start = (now - timedelta(days=30, hours=48)).replace(minute=0)
    end = now + timedelta(hours=48)
    expected = int((end - start).total_seconds() // 3600) + 1

    assert len(candles) == expected
    assert candles[0].time == _ts(start)
    assert candles[-1].time <= _ts(end)
    assert all(not c.is_event for c in candles)
    assert all(c.event_name is None for c in candles)


def test_no_events_is_noise_only(now):
    candles = build_hourly_series(50, [], now=now)

    assert candles[0].open == 50
    for prev, cur in zip(candles, candles[1:]):
        assert cur.time - prev.time == 3600
        assert abs(cur.close - cur.open) <= 0.2 + 0.01
        assert cur.high - max(cur.open, cur.close) <= 0.2 + 0.01
        assert 0 <= cur.volume <= 4
    assert_ohlc_invariant(candles)


def test_single_event_padding():
    event = make_event("Launch", datetime(2024, 3, 10, 15, 20, tzinfo=timezone.utc))
    candles = build_hourly_series(50, [event])

    assert candles[0].time == _ts(datetime(2024, 3, 8, 15, tzinfo=timezone.utc))
    assert candles[-1].time == _ts(datetime(2024, 3, 12, 15, tzinfo=timezone.utc))
    assert len(candles) == 97


def test_max_bullish_event_shapes_its_candle():
    when = datetime(2024, 3, 10, 15, 20, tzinfo=timezone.utc)
    event = make_event("Dream offer", when, impact=10, intensity=10, stickiness=1)
    candles = build_hourly_series(50, [event])

    hour = _ts(when.replace(minute=0))
    [candle] = [c for c in candles if c.time == hour]
    assert candle.is_event
    assert candle.event_name == "Dream offer"
    # 48 hours of noise move the open by at most 48 * 0.2
    assert abs(candle.open - 50) <= 9.6
    assert candle.close == pytest.approx(candle.open + 10, abs=0.02)
    assert candle.high == pytest.approx(candle.open + 20, abs=0.02)
    assert candle.low == pytest.approx(candle.open, abs=0.02)
    assert candle.volume == 100

    # Only the event hour is flagged
    assert sum(c.is_event for c in candles) == 1


def test_events_in_same_hour_are_combined():
    base = datetime(2024, 3, 10, 15, 0, tzinfo=timezone.utc)
    late = make_event("Second", base + timedelta(minutes=45), impact=-4, intensity=2, stickiness=1)
    early = make_event("First", base + timedelta(minutes=5), impact=6, intensity=3, stickiness=1)

    candles = build_hourly_series(50, [late, early])
    [candle] = [c for c in candles if c.is_event]

    assert candle.event_name == "First, Second"
    assert candle.volume == 50
    # +6 then -4 on the close
    assert candle.close == pytest.approx(candle.open + 2, abs=0.02)
    # The +6 close tops the first +3.6 spike
    assert candle.high == pytest.approx(candle.open + 6, abs=0.02)
    # Second spike (-1.6 from +6) stays above the open
    assert candle.low == pytest.approx(candle.open, abs=0.02)


def test_event_exactly_on_bucket_boundary_belongs_to_that_hour():
    when = datetime(2024, 3, 10, 16, 0, tzinfo=timezone.utc)
    candles = build_hourly_series(50, [make_event("On the hour", when)])
    [candle] = [c for c in candles if c.is_event]
    assert candle.time == _ts(when)


def test_input_order_does_not_matter(week_of_events):
    forward = build_hourly_series(50, week_of_events)
    backward = build_hourly_series(50, list(reversed(week_of_events)))
    assert forward == backward


def test_identical_inputs_identical_output(week_of_events):
    first = build_hourly_series(62.5, week_of_events)
    second = build_hourly_series(62.5, week_of_events)
    assert [c.model_dump_json() for c in first] == [c.model_dump_json() for c in second]


def test_seed_depends_on_score_and_event_count(now):
    a = build_hourly_series(50, [], now=now)
    b = build_hourly_series(51, [], now=now)
    assert [c.close - c.open for c in a[:24]] != [c.close - c.open for c in b[:24]]


def test_crash_is_clamped_at_zero():
    start = datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    crashes = [
        make_event(f"Crash {i}", start + timedelta(hours=i), impact=-10, intensity=10, stickiness=1)
        for i in range(5)
    ]
    candles = build_hourly_series(20, crashes)

    assert_ohlc_invariant(candles)
    assert min(c.low for c in candles) == 0
    event_candles = [c for c in candles if c.is_event]
    assert event_candles[-1].close == 0


def test_rally_is_clamped_at_hundred():
    start = datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    rallies = [
        make_event(f"Win {i}", start + timedelta(hours=i), impact=10, intensity=10, stickiness=1)
        for i in range(6)
    ]
    candles = build_hourly_series(80, rallies)

    assert_ohlc_invariant(candles)
    assert max(c.high for c in candles) == 100


def test_invariant_holds_for_many_events(week_of_events):
    assert_ohlc_invariant(build_hourly_series(50, week_of_events))
    assert_ohlc_invariant(
        build_hourly_series(50, week_of_events, config=SynthesisConfig(event_model="necm"))
    )


def test_configurable_padding():
    event = make_event("Launch", datetime(2024, 3, 10, 15, 20, tzinfo=timezone.utc))
    candles = build_hourly_series(50, [event], config=SynthesisConfig(padding_hours=2))
    assert len(candles) == 5


def test_resolve_range_floors_start_only(now):
    start, end = resolve_range([], now, SynthesisConfig())
    assert start.minute == 0 and start.second == 0
    assert end == now + timedelta(hours=48)


class TestLifeEventClamping:
    def test_out_of_range_values_are_clamped(self):
        event = LifeEvent(
            name="Off the charts",
            date=datetime(2024, 1, 1),
            impact=25,
            intensity=0,
            stickiness=3,
        )
        assert event.impact == 10
        assert event.intensity == 1
        assert event.stickiness == 1

    def test_negative_impact_clamped(self):
        event = LifeEvent(name="x", date=datetime(2024, 1, 1), impact=-40)
        assert event.impact == -10

    def test_naive_date_is_utc(self):
        event = LifeEvent(name="x", date=datetime(2024, 1, 1, 12))
        assert event.date.tzinfo == timezone.utc

    def test_iso_string_date(self):
        event = LifeEvent(name="x", date="2024-02-04T10:30:00Z")
        assert event.date == datetime(2024, 2, 4, 10, 30, tzinfo=timezone.utc)

    def test_offset_date_is_stored_in_utc(self):
        plus_five = timezone(timedelta(hours=5))
        event = LifeEvent(name="x", date=datetime(2024, 3, 4, 2, tzinfo=plus_five))
        assert event.date == datetime(2024, 3, 3, 21, tzinfo=timezone.utc)
        assert event.date.tzinfo == timezone.utc

    def test_dates_are_kept_inside_the_calendar_window(self):
        late = LifeEvent(name="x", date=datetime.max)
        early = LifeEvent(name="x", date=datetime.min.replace(tzinfo=timezone.utc))
        assert late.date == LATEST_EVENT_DATE
        assert early.date == EARLIEST_EVENT_DATE


class TestEventModels:
    def test_linear_spike_and_move(self):
        event = make_event("x", datetime(2024, 1, 1), impact=-5, intensity=4, stickiness=0.5)
        shape = linear_event_candle(event, 50)
        assert shape.close == pytest.approx(47.5)
        assert shape.low == pytest.approx(46)
        assert shape.high == pytest.approx(50)
        assert shape.volume == 40

    def test_necm_bullish(self):
        event = make_event("x", datetime(2024, 1, 1), impact=10, intensity=10, stickiness=1)
        shape = necm_event_candle(event, 50)
        # 15% body, 8% wicks
        assert shape.close == pytest.approx(57.5)
        assert shape.high == pytest.approx(57.5 + 4)
        assert shape.low == pytest.approx(50 - 4)

    def test_necm_panic_skew(self):
        event = make_event("x", datetime(2024, 1, 1), impact=-10, intensity=10, stickiness=1)
        shape = necm_event_candle(event, 50)
        assert shape.close == pytest.approx(42.5)
        # Upper wick dampened, lower wick doubled
        assert shape.high == pytest.approx(50 + 4 * 0.8)
        assert shape.low == pytest.approx(42.5 - 8)

    def test_necm_zero_stickiness_is_flat(self):
        event = make_event("x", datetime(2024, 1, 1), impact=10, intensity=10, stickiness=0)
        shape = necm_event_candle(event, 50)
        assert shape.close == shape.open == shape.high == shape.low == 50

    def test_unknown_model_falls_back_to_linear(self):
        assert get_event_model("mystery") is linear_event_candle
        assert get_event_model("NECM") is necm_event_candle


class TestRangeLimits:
    def test_span_keeps_most_recent_hours(self):
        events = [
            make_event("Old", datetime(2024, 1, 1, tzinfo=timezone.utc)),
            make_event("Recent", datetime(2024, 3, 1, tzinfo=timezone.utc)),
        ]
        candles = build_hourly_series(
            50, events, config=SynthesisConfig(max_span_hours=100)
        )

        assert len(candles) == 101
        assert candles[-1].time == _ts(datetime(2024, 3, 3, tzinfo=timezone.utc))
        assert [c.event_name for c in candles if c.is_event] == ["Recent"]
        assert_ohlc_invariant(candles)

    def test_span_within_limit_is_untouched(self, now):
        start, end = resolve_range([], now, SynthesisConfig(max_span_hours=10_000))
        assert end - start > timedelta(days=30)

    def test_extreme_dates_build_a_market(self):
        events = [
            make_event("Dawn", datetime(1, 1, 1, tzinfo=timezone.utc)),
            make_event("Far future", datetime(9999, 12, 31, 23, tzinfo=timezone.utc)),
        ]
        result = generate_market_history(
            50, events, config=SynthesisConfig(max_span_hours=240)
        )

        assert result.history
        assert result.period_name == "Jan 1 - Dec 31, 2999"
        assert_ohlc_invariant(result.history)
