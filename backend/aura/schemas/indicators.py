"""
CONTRACT 2: Indicator Library

Input: list[OHLC]
Output: time-aligned indicator series (LinePoint / HistogramPoint)

This module performs ALL indicator math for the chart overlay and the
analysis engine. Pure Python/NumPy. An empty series means "not enough
candles", never an error.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from aura.schemas.market import OHLC


BULLISH_COLOR = "#00C896"
BEARISH_COLOR = "#FF5F5F"


# =============================================================================
# INPUT: IndicatorRequest
# =============================================================================


class IndicatorRequest(BaseModel):
    """
    Request for an indicator series.
    Sent by: Frontend chart
    Received by: Indicator API

    `period` falls back to the indicator's default when omitted.
    """

    history: list[OHLC] = Field(default_factory=list)
    period: Optional[int] = Field(default=None, ge=1, le=500)
    std_dev: float = Field(default=2.0, gt=0, le=10)


# =============================================================================
# OUTPUT: Indicator Components
# =============================================================================


class LinePoint(BaseModel):
    """One value of a line series."""

    time: Union[int, str]
    value: float


class HistogramPoint(BaseModel):
    """One bar of a histogram series, colored by sign."""

    time: Union[int, str]
    value: float
    color: str = BULLISH_COLOR


class BollingerBands(BaseModel):
    """Bollinger Bands; all three series start at index period - 1."""

    upper: list[LinePoint] = Field(default_factory=list)
    middle: list[LinePoint] = Field(default_factory=list)
    lower: list[LinePoint] = Field(default_factory=list)


class MACDResult(BaseModel):
    """MACD (12, 26, 9) line, signal line and histogram."""

    macd: list[LinePoint] = Field(default_factory=list)
    signal: list[LinePoint] = Field(default_factory=list)
    histogram: list[HistogramPoint] = Field(default_factory=list)


class IndicatorOverlay(BaseModel):
    """
    Everything the candlestick chart draws on top of the candles.
    Returned by: Indicator Service
    Consumed by: Frontend chart
    """

    ema: list[LinePoint] = Field(default_factory=list)
    bollinger: BollingerBands = Field(default_factory=BollingerBands)
    rsi: list[LinePoint] = Field(default_factory=list)
    macd: MACDResult = Field(default_factory=MACDResult)
