"""
Sentiment / Analysis Engine

Scores a candle series with four rules and maps the score to a sentiment,
a confidence and a projected target:

    trend       EMA(7) vs EMA(21)           +/-4
    momentum    EMA(7) slope beyond 0.1     +/-2
    RSI         extremes are contrarian     +/-1
                mid-range confirms trend    +/-1
    volume      spike > 1.5x previous       +/-1

Total over any list of candles: short series get a neutral, zero
confidence result instead of an error.
"""

import logging
from typing import Sequence

from aura.schemas.analysis import AnalysisResult, Sentiment
from aura.schemas.market import OHLC
from aura.services.indicators.service import calculate_ema, calculate_rsi

logger = logging.getLogger(__name__)

MIN_CANDLES = 5

EMA_SHORT_PERIOD = 7
EMA_LONG_PERIOD = 21
RSI_PERIOD = 14

SLOPE_THRESHOLD = 0.1
RSI_OVERBOUGHT = 75
RSI_OVERSOLD = 25
RSI_BULL_CONFIRM = 55
RSI_BEAR_CONFIRM = 45
VOLUME_SPIKE_RATIO = 1.5

BULLISH_SCORE = 3
BEARISH_SCORE = -3

INSUFFICIENT_DATA_SIGNAL = "Insufficient data for technical analysis"

DESCRIPTIONS = {
    Sentiment.BULLISH: (
        "Technical structure is constructive. Moving averages suggest "
        "accumulating emotional capital. Immediate resistance projected "
        "at {target:.2f}."
    ),
    Sentiment.BEARISH: (
        "Market structure is deteriorating. Momentum has shifted negative, "
        "suggesting a period of burnout or regression. Support testing "
        "likely near {target:.2f}."
    ),
    Sentiment.NEUTRAL: (
        "Price action is chopping sideways. Indecisive signals suggest a "
        "holding pattern until a new catalyst event occurs. Monitor volatility."
    ),
}


def _insufficient_data(data: Sequence[OHLC]) -> AnalysisResult:
    return AnalysisResult(
        sentiment=Sentiment.NEUTRAL,
        score=0,
        confidence=0,
        target_price=min(100.0, max(0.0, data[-1].close)) if data else 50.0,
        signals=[INSUFFICIENT_DATA_SIGNAL],
        description="Market history is too short to determine a trend.",
    )


def classify(score: int) -> Sentiment:
    """Map a rule score to a sentiment bucket."""
    if score >= BULLISH_SCORE:
        return Sentiment.BULLISH
    if score <= BEARISH_SCORE:
        return Sentiment.BEARISH
    return Sentiment.NEUTRAL


def confidence_for(score: int) -> float:
    """60% base plus 4 points per unit of score, capped at 95%."""
    return float(min(95, 60 + abs(score) * 4))


def project_target(last: OHLC, score: int) -> float:
    """
    Project a target from the last candle's range.

    The candle range relative to its open is the volatility estimate; at
    least a 5% move is projected, scaled by |score| / 10.
    """
    volatility = (last.high - last.low) / last.open if last.open else 0.0
    volatility_factor = max(0.05, volatility * 5)

    direction = 1 if score > 0 else -1
    percent_change = direction * (abs(score) / 10) * volatility_factor

    target = last.close * (1 + percent_change)
    return min(100.0, max(0.0, target))


def analyze_market(data: Sequence[OHLC]) -> AnalysisResult:
    """
    Technical read of a candle series.

    Args:
        data: Candles at whatever timeframe is displayed, oldest first

    Returns:
        Sentiment, score, confidence, target and the triggered signals
    """
    if len(data) < MIN_CANDLES:
        return _insufficient_data(data)

    last = data[-1]
    prev = data[-2]
    current_price = last.close

    rsi_series = calculate_rsi(data, RSI_PERIOD)
    ema_short = calculate_ema(data, EMA_SHORT_PERIOD)
    ema_long = calculate_ema(data, EMA_LONG_PERIOD)

    current_rsi = rsi_series[-1].value if rsi_series else 50.0
    short_now = ema_short[-1].value if ema_short else current_price
    long_now = ema_long[-1].value if ema_long else current_price
    short_prev = ema_short[-2].value if len(ema_short) > 1 else short_now

    score = 0
    signals: list[str] = []

    # Trend (EMA cross)
    if short_now > long_now:
        score += 4
        signals.append("Golden Cross (Uptrend Confirmed)")
    elif short_now < long_now:
        score -= 4
        signals.append("Death Cross (Downtrend Confirmed)")

    # Immediate momentum
    slope = short_now - short_prev
    if slope > SLOPE_THRESHOLD:
        score += 2
        signals.append("Short-term momentum is positive")
    elif slope < -SLOPE_THRESHOLD:
        score -= 2
        signals.append("Short-term momentum is negative")

    # RSI: contrarian at the extremes, confirming in between
    if current_rsi > RSI_OVERBOUGHT:
        score -= 1
        signals.append(f"RSI Overbought ({current_rsi:.0f}) - Consolidation expected")
    elif current_rsi < RSI_OVERSOLD:
        score += 1
        signals.append(f"RSI Oversold ({current_rsi:.0f}) - Relief rally likely")
    else:
        if current_rsi > RSI_BULL_CONFIRM and score > 0:
            score += 1
        if current_rsi < RSI_BEAR_CONFIRM and score < 0:
            score -= 1

    # Volume confirmation, only against a non-empty previous candle
    if last.volume and prev.volume and last.volume > prev.volume * VOLUME_SPIKE_RATIO:
        if last.close > last.open:
            score += 1
            signals.append("High volume buying detected")
        else:
            score -= 1
            signals.append("High volume selling pressure")

    sentiment = classify(score)
    target = project_target(last, score)

    logger.debug(
        f"Analyzed {len(data)} candles: score={score} sentiment={sentiment.value} "
        f"rsi={current_rsi:.1f}"
    )

    return AnalysisResult(
        sentiment=sentiment,
        score=score,
        confidence=confidence_for(score),
        target_price=target,
        signals=signals,
        description=DESCRIPTIONS[sentiment].format(target=target),
    )
