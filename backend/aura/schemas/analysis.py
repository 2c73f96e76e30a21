"""
CONTRACT 3: Analysis Engine

Input: list[OHLC] (whichever timeframe is on screen)
Output: AnalysisResult

Rule-based scoring only. Deterministic for a given series.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from aura.schemas.market import OHLC


# =============================================================================
# ENUMS
# =============================================================================


class Sentiment(str, Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


# =============================================================================
# INPUT: AnalysisRequest
# =============================================================================


class AnalysisRequest(BaseModel):
    """
    Request for a sentiment read of a candle series.
    Sent by: Frontend
    Received by: Analysis API
    """

    history: list[OHLC] = Field(default_factory=list)


# =============================================================================
# OUTPUT: AnalysisResult
# =============================================================================


class AnalysisResult(BaseModel):
    """Sentiment, confidence and projected target for a candle series."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sentiment: Sentiment
    score: int = Field(..., description="Signed rule score, roughly -10 to 10")
    confidence: float = Field(..., ge=0, le=100)
    target_price: float = Field(..., ge=0, le=100, alias="targetPrice")
    signals: list[str] = Field(default_factory=list)
    description: str
