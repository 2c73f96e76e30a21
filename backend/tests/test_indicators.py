"""Indicator kernels and their OHLC wrappers."""

import math

import numpy as np
import pytest

from aura.schemas.indicators import BEARISH_COLOR, BULLISH_COLOR, IndicatorRequest
from aura.services.indicators import (
    IndicatorService,
    calculate_bollinger,
    calculate_ema,
    calculate_macd,
    calculate_rsi,
)
from aura.services.indicators.calculations import ema, rsi, sma
from tests.helpers import make_candles


def _values(points):
    return [p.value for p in points]


class TestKernels:
    def test_sma_pads_with_nan(self):
        result = sma(np.array([1.0, 2.0, 3.0, 4.0]), 2)
        assert math.isnan(result[0])
        assert list(result[1:]) == [1.5, 2.5, 3.5]

    def test_ema_seeded_with_first_value(self):
        assert list(ema(np.array([1.0, 2.0, 3.0]), 3)) == [1.0, 1.5, 2.25]

    def test_rsi_starts_after_period(self):
        result = rsi(np.array([1.0, 2.0, 1.0, 2.0]), 2)
        assert np.isnan(result[:3]).all()
        assert result[3] == pytest.approx(75)


class TestEMA:
    def test_one_point_per_candle(self):
        candles = make_candles([1, 2, 3])
        points = calculate_ema(candles, 3)

        assert _values(points) == [1.0, 1.5, 2.25]
        assert [p.time for p in points] == [c.time for c in candles]

    def test_too_short_is_empty(self):
        assert calculate_ema(make_candles([1, 2]), 3) == []
        assert calculate_ema([], 3) == []


class TestRSI:
    def test_alternating_series(self):
        candles = make_candles([1, 2, 1, 2])
        points = calculate_rsi(candles, 2)

        assert len(points) == 1
        assert points[0].time == candles[3].time
        assert points[0].value == pytest.approx(75)

    def test_only_gains_is_hundred(self):
        points = calculate_rsi(make_candles(list(range(10, 40))), 14)
        assert len(points) == 30 - 15
        assert all(v == 100 for v in _values(points))

    def test_stays_in_range(self):
        closes = [50 + 10 * math.sin(i / 3) for i in range(60)]
        assert all(0 <= v <= 100 for v in _values(calculate_rsi(make_candles(closes))))

    def test_needs_more_than_period(self):
        assert calculate_rsi(make_candles(list(range(15))), 15) == []


class TestBollinger:
    def test_population_std(self):
        bands = calculate_bollinger(make_candles([1, 2, 3]), period=3, std_dev=2)
        sd = math.sqrt(2 / 3)

        assert _values(bands.middle) == [pytest.approx(2)]
        assert _values(bands.upper) == [pytest.approx(2 + 2 * sd)]
        assert _values(bands.lower) == [pytest.approx(2 - 2 * sd)]

    def test_starts_at_period_minus_one(self):
        candles = make_candles([50 + (i % 5) for i in range(25)])
        bands = calculate_bollinger(candles)

        assert len(bands.middle) == 6
        assert bands.middle[0].time == candles[19].time
        for upper, middle, lower in zip(bands.upper, bands.middle, bands.lower):
            assert lower.value <= middle.value <= upper.value

    def test_too_short_is_empty(self):
        bands = calculate_bollinger(make_candles([1, 2, 3]))
        assert bands.upper == bands.middle == bands.lower == []


class TestMACD:
    def test_needs_35_candles(self):
        result = calculate_macd(make_candles([50 + i % 7 for i in range(34)]))
        assert result.macd == result.signal == result.histogram == []

    def test_series_are_aligned(self):
        candles = make_candles([50 + 5 * math.sin(i / 4) for i in range(35)])
        result = calculate_macd(candles)

        assert len(result.macd) == len(result.signal) == len(result.histogram) == 35
        for line, signal, bar, candle in zip(
            result.macd, result.signal, result.histogram, candles
        ):
            assert line.time == signal.time == bar.time == candle.time
            assert bar.value == pytest.approx(line.value - signal.value)
            assert bar.color == (BULLISH_COLOR if bar.value >= 0 else BEARISH_COLOR)


class TestIndicatorService:
    def test_overlay(self):
        candles = make_candles([50 + 5 * math.sin(i / 4) for i in range(40)])
        overlay = IndicatorService().execute(IndicatorRequest(history=candles))

        assert len(overlay.ema) == 40
        assert len(overlay.bollinger.middle) == 21
        assert len(overlay.rsi) == 40 - 15
        assert len(overlay.macd.histogram) == 40

    def test_overlay_custom_ema_period(self):
        candles = make_candles([50, 51, 52])
        overlay = IndicatorService().execute(IndicatorRequest(history=candles, period=2))
        assert len(overlay.ema) == 3
        assert overlay.rsi == []

    def test_empty_history(self):
        overlay = IndicatorService().execute(IndicatorRequest())
        assert overlay.ema == []
        assert overlay.macd.macd == []
