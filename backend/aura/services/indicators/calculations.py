"""
Indicator Kernels

NumPy kernels over a float array of closes. Every kernel returns an array
as long as its input; warm-up positions hold NaN so callers can zip the
result back onto the candles.
"""

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


def _nan_like(values: np.ndarray) -> np.ndarray:
    return np.full(len(values), np.nan)


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(values: np.ndarray, period: int) -> np.ndarray:
    """Trailing simple moving average, defined from index period - 1."""
    result = _nan_like(values)
    if len(values) >= period:
        result[period - 1 :] = sliding_window_view(values, period).mean(axis=1)
    return result


def ema(values: np.ndarray, period: int) -> np.ndarray:
    """
    Exponential moving average with k = 2 / (period + 1).

    Seeded with the first value rather than an SMA, so once the input
    holds `period` values every position is defined. Shorter input is all
    NaN.
    """
    if len(values) == 0 or len(values) < period:
        return _nan_like(values)

    k = 2 / (period + 1)
    result = np.empty(len(values))
    running = values[0]
    for i, value in enumerate(values):
        running = value * k + running * (1 - k) if i else value
        result[i] = running
    return result


# =============================================================================
# MOMENTUM
# =============================================================================


def rsi(values: np.ndarray, period: int = 14) -> np.ndarray:
    """
    Wilder RSI.

    Mean gain and loss of the first `period` deltas seed the smoothing;
    the first value lands at index period + 1. A window without losses
    reads 100.
    """
    result = _nan_like(values)
    if len(values) <= period:
        return result

    deltas = np.diff(values)
    gains = np.clip(deltas, 0, None)
    losses = np.clip(-deltas, 0, None)

    avg_gain = gains[:period].mean()
    avg_loss = losses[:period].mean()

    for i in range(period, len(deltas)):
        avg_gain = (avg_gain * (period - 1) + gains[i]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i]) / period
        if avg_loss == 0:
            result[i + 1] = 100.0
        else:
            result[i + 1] = 100 - 100 / (1 + avg_gain / avg_loss)

    return result


def macd(
    values: np.ndarray,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    MACD line, signal line and histogram.

    The signal is the EMA of the MACD float series itself. All three are
    NaN unless the input covers slow_period + signal_period values.

    Returns: (macd_line, signal_line, histogram)
    """
    if len(values) < slow_period + signal_period:
        return _nan_like(values), _nan_like(values), _nan_like(values)

    macd_line = ema(values, fast_period) - ema(values, slow_period)
    signal_line = ema(macd_line, signal_period)
    return macd_line, signal_line, macd_line - signal_line


# =============================================================================
# VOLATILITY
# =============================================================================


def bollinger_bands(
    values: np.ndarray, period: int = 20, std_dev: float = 2.0
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    SMA middle band +/- std_dev population standard deviations.

    Returns: (upper, middle, lower)
    """
    middle = sma(values, period)
    spread = _nan_like(values)
    if len(values) >= period:
        spread[period - 1 :] = sliding_window_view(values, period).std(axis=1)

    return middle + std_dev * spread, middle, middle - std_dev * spread
