"""
CONTRACT 1: Market Synthesis

Input: initial score + list[LifeEvent] + Timeframe
Output: MarketHistory

Life events are the only input. Every candle, summary and period label is
derived from them on demand; nothing here is persisted.
"""

from datetime import date as date_type, datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class Timeframe(str, Enum):
    H1 = "1H"
    H4 = "4H"
    D1 = "1D"

    @property
    def bucket_hours(self) -> int:
        """Number of hourly master candles folded into one candle."""
        return TIMEFRAME_HOURS[self]


TIMEFRAME_HOURS = {
    Timeframe.H1: 1,
    Timeframe.H4: 4,
    Timeframe.D1: 24,
}


# =============================================================================
# INPUT: LifeEvent
# =============================================================================


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# Dates are clamped into this window so padding and label formatting
# never leave the datetime range.
EARLIEST_EVENT_DATE = datetime(1900, 1, 1, tzinfo=timezone.utc)
LATEST_EVENT_DATE = datetime(2999, 12, 31, tzinfo=timezone.utc)


class LifeEvent(BaseModel):
    """
    A single subjective event on the user's timeline.
    Sent by: Frontend / Session store
    Received by: Market Synthesis Service

    Numeric fields outside their range are clamped, never rejected.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    date: datetime = Field(
        ..., description="When the event happened (naive = UTC, stored in UTC)"
    )
    impact: int = Field(default=0, description="-10 (crash) to 10 (rally)")
    intensity: float = Field(default=5.0, description="1 (calm) to 10 (chaotic)")
    stickiness: float = Field(
        default=0.5, description="0 (transient) to 1 (permanent shift)"
    )

    @field_validator("date")
    @classmethod
    def _normalize_date(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        # Compare before converting; astimezone can overflow at the extremes
        if value < EARLIEST_EVENT_DATE:
            return EARLIEST_EVENT_DATE
        if value > LATEST_EVENT_DATE:
            return LATEST_EVENT_DATE
        return value.astimezone(timezone.utc)

    @field_validator("impact")
    @classmethod
    def _clamp_impact(cls, value: int) -> int:
        return int(_clamp(value, -10, 10))

    @field_validator("intensity")
    @classmethod
    def _clamp_intensity(cls, value: float) -> float:
        return _clamp(value, 1.0, 10.0)

    @field_validator("stickiness")
    @classmethod
    def _clamp_stickiness(cls, value: float) -> float:
        return _clamp(value, 0.0, 1.0)

    @property
    def timestamp(self) -> float:
        return self.date.timestamp()


# =============================================================================
# OUTPUT: MarketHistory Components
# =============================================================================


class OHLC(BaseModel):
    """
    Single candlestick on the 0-100 score scale.

    `time` is Unix seconds for intraday candles and a YYYY-MM-DD label for
    daily candles, matching what charting libraries expect.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    time: Union[int, str]
    open: float
    high: float
    low: float
    close: float
    volume: float = Field(default=0, ge=0)
    is_event: bool = Field(default=False, alias="isEvent")
    event_name: Optional[str] = Field(default=None, alias="eventName")


class MarketSummary(BaseModel):
    """Session statistics, always derived from the hourly master series."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    open: float
    high: float
    low: float
    close: float
    volume: float = Field(..., ge=0)
    roe: float = Field(..., description="Return on equity in percent")
    is_liquidation_risk: bool = Field(..., alias="isLiquidationRisk")


class MarketHistory(BaseModel):
    """
    Complete synthesized market.
    Returned by: Market Synthesis Service
    Consumed by: Indicator Library, Analysis Engine, Frontend chart
    """

    model_config = ConfigDict(populate_by_name=True)

    history: list[OHLC]
    summary: MarketSummary
    period_name: str = Field(..., alias="periodName")
    timeframe: Timeframe = Timeframe.D1


# =============================================================================
# REQUEST: MarketRequest
# =============================================================================


class MarketRequest(BaseModel):
    """
    Request for a synthesized market.
    Sent by: Frontend
    Received by: Market API
    """

    initial_score: float = Field(
        default=50.0, description="Starting score; clamped into 0-100"
    )
    events: list[LifeEvent] = Field(default_factory=list)
    timeframe: Timeframe = Field(default=Timeframe.D1)

    class Config:
        json_schema_extra = {
            "example": {
                "initial_score": 50,
                "events": [
                    {
                        "name": "Got the job",
                        "date": "2024-02-04T10:30:00Z",
                        "impact": 8,
                        "intensity": 7,
                        "stickiness": 0.8,
                    }
                ],
                "timeframe": "1D",
            }
        }


# =============================================================================
# INTRADAY CHECKLIST
# =============================================================================


class ChecklistTask(BaseModel):
    """
    One task of a daily checklist.

    Only filled tasks with a `time` move the intraday market; the numeric
    fields share LifeEvent's ranges and clamping.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    time: Optional[str] = Field(
        default=None,
        pattern=r"^([01]\d|2[0-3]):[0-5]\d$",
        description="HH:MM within the day",
    )
    impact: int = 0
    intensity: float = 5.0
    stickiness: float = 0.5
    filled: bool = False

    @property
    def minute_of_day(self) -> int:
        hours, minutes = self.time.split(":")
        return int(hours) * 60 + int(minutes)

    def to_event(self, day: date_type) -> LifeEvent:
        """The task as a LifeEvent at its time on `day` (UTC)."""
        at = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
        return LifeEvent(
            id=self.id,
            name=self.name,
            date=at + timedelta(minutes=self.minute_of_day),
            impact=self.impact,
            intensity=self.intensity,
            stickiness=self.stickiness,
        )


class IntradayMarket(BaseModel):
    """Half-hour candles of a single checklist day."""

    model_config = ConfigDict(populate_by_name=True)

    day: date_type
    history: list[OHLC]
    baseline: float
    close: float
    change_percent: float = Field(..., alias="changePercent")


class IntradayRequest(BaseModel):
    """
    Request for a checklist day's market.
    Sent by: Frontend checklist
    Received by: Market API
    """

    tasks: list[ChecklistTask] = Field(default_factory=list)
    day: Optional[date_type] = Field(
        default=None, description="Day to chart (defaults to today, UTC)"
    )
