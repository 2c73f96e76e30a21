"""
Indicator Engine Service Implementation

Wraps the NumPy kernels in calculations.py so they speak OHLC: every
function takes a candle list and returns points keyed by candle time.
Insufficient data returns empty series, never an error.
"""

from typing import Optional, Sequence
import numpy as np

from aura.schemas.market import OHLC
from aura.schemas.indicators import (
    BEARISH_COLOR,
    BULLISH_COLOR,
    BollingerBands,
    HistogramPoint,
    IndicatorOverlay,
    IndicatorRequest,
    LinePoint,
    MACDResult,
)
from aura.services.indicators.interface import IndicatorServiceInterface
from aura.services.indicators.calculations import (
    bollinger_bands,
    ema,
    macd,
    rsi,
)

MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9

# Chart overlay defaults
OVERLAY_EMA_PERIOD = 20


def _closes(data: Sequence[OHLC]) -> np.ndarray:
    """Convert OHLC list to a close-price array."""
    return np.array([c.close for c in data], dtype=float)


def _to_points(data: Sequence[OHLC], values: np.ndarray) -> list[LinePoint]:
    """Pair defined values with their candle times, skipping NaN."""
    return [
        LinePoint(time=candle.time, value=float(value))
        for candle, value in zip(data, values)
        if not np.isnan(value)
    ]


def calculate_ema(data: Sequence[OHLC], period: int) -> list[LinePoint]:
    """EMA of closes; one point per candle, empty if len(data) < period."""
    if not data or len(data) < period:
        return []
    return _to_points(data, ema(_closes(data), period))


def calculate_rsi(data: Sequence[OHLC], period: int = 14) -> list[LinePoint]:
    """RSI of closes; empty if len(data) <= period."""
    if len(data) <= period:
        return []
    return _to_points(data, rsi(_closes(data), period))


def calculate_bollinger(
    data: Sequence[OHLC], period: int = 20, std_dev: float = 2.0
) -> BollingerBands:
    """Bollinger Bands starting at index period - 1."""
    if len(data) < period:
        return BollingerBands()

    upper, middle, lower = bollinger_bands(_closes(data), period, std_dev)
    return BollingerBands(
        upper=_to_points(data, upper),
        middle=_to_points(data, middle),
        lower=_to_points(data, lower),
    )


def calculate_macd(data: Sequence[OHLC]) -> MACDResult:
    """MACD (12, 26, 9); empty if fewer than 35 candles."""
    if len(data) < MACD_SLOW + MACD_SIGNAL:
        return MACDResult()

    macd_line, signal_line, histogram = macd(
        _closes(data), MACD_FAST, MACD_SLOW, MACD_SIGNAL
    )

    bars = [
        HistogramPoint(
            time=candle.time,
            value=float(value),
            color=BULLISH_COLOR if value >= 0 else BEARISH_COLOR,
        )
        for candle, value in zip(data, histogram)
        if not np.isnan(value)
    ]

    return MACDResult(
        macd=_to_points(data, macd_line),
        signal=_to_points(data, signal_line),
        histogram=bars,
    )


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Calculates the chart overlay for a candle series.
    All calculations are deterministic and reproducible.
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    def execute(self, input_data: IndicatorRequest) -> IndicatorOverlay:
        """Calculate the full chart overlay for a series."""
        data = input_data.history
        return IndicatorOverlay(
            ema=self.ema(data, input_data.period or OVERLAY_EMA_PERIOD),
            bollinger=self.bollinger(data, std_dev=input_data.std_dev),
            rsi=self.rsi(data),
            macd=self.macd(data),
        )

    def ema(self, data: Sequence[OHLC], period: int) -> list[LinePoint]:
        return calculate_ema(data, period)

    def rsi(self, data: Sequence[OHLC], period: int = 14) -> list[LinePoint]:
        return calculate_rsi(data, period)

    def bollinger(
        self, data: Sequence[OHLC], period: int = 20, std_dev: float = 2.0
    ) -> BollingerBands:
        return calculate_bollinger(data, period, std_dev)

    def macd(self, data: Sequence[OHLC]) -> MACDResult:
        return calculate_macd(data)


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
