"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod
from typing import Sequence

from aura.services.base import BaseService
from aura.schemas.market import OHLC
from aura.schemas.indicators import (
    BollingerBands,
    IndicatorOverlay,
    IndicatorRequest,
    LinePoint,
    MACDResult,
)


class IndicatorServiceInterface(BaseService[IndicatorRequest, IndicatorOverlay]):
    """
    Indicator Engine Service Contract.

    INPUT: IndicatorRequest
        - history: OHLC candles at any timeframe
        - period: EMA period for the overlay (optional)

    OUTPUT: IndicatorOverlay
        - EMA, Bollinger Bands, RSI and MACD series keyed by candle time
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    def execute(self, input_data: IndicatorRequest) -> IndicatorOverlay:
        """Calculate the full chart overlay."""
        pass

    @abstractmethod
    def ema(self, data: Sequence[OHLC], period: int) -> list[LinePoint]:
        pass

    @abstractmethod
    def rsi(self, data: Sequence[OHLC], period: int = 14) -> list[LinePoint]:
        pass

    @abstractmethod
    def bollinger(
        self, data: Sequence[OHLC], period: int = 20, std_dev: float = 2.0
    ) -> BollingerBands:
        pass

    @abstractmethod
    def macd(self, data: Sequence[OHLC]) -> MACDResult:
        pass
