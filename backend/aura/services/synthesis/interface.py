"""
Market Synthesis Service Interface

Defines the contract for the synthesis layer.
"""

from abc import abstractmethod
from datetime import date, datetime
from typing import Optional, Sequence

from aura.services.base import BaseService
from aura.schemas.market import (
    ChecklistTask,
    IntradayMarket,
    LifeEvent,
    MarketHistory,
    MarketRequest,
    Timeframe,
)


class MarketSynthesisServiceInterface(BaseService[MarketRequest, MarketHistory]):
    """
    Market Synthesis Service Contract.

    INPUT: MarketRequest
        - initial_score: starting score (clamped into 0-100)
        - events: LifeEvents in any order
        - timeframe: display resolution

    OUTPUT: MarketHistory
        - history: candles at the requested timeframe
        - summary: resolution-independent session statistics
        - period_name: human label of the covered period
    """

    @property
    def name(self) -> str:
        return "MarketSynthesisService"

    @abstractmethod
    def execute(self, input_data: MarketRequest) -> MarketHistory:
        """Synthesize the market described by a request."""
        pass

    @abstractmethod
    def generate(
        self,
        initial_score: float,
        events: Sequence[LifeEvent],
        timeframe: Timeframe = Timeframe.D1,
        now: Optional[datetime] = None,
    ) -> MarketHistory:
        """
        Synthesize a market from raw inputs.

        Args:
            initial_score: Starting score
            events: Life events
            timeframe: Display resolution
            now: Clock used when there are no events

        Returns:
            Candles, summary and period label
        """
        pass

    @abstractmethod
    def intraday(
        self, tasks: Sequence[ChecklistTask], day: Optional[date] = None
    ) -> IntradayMarket:
        """Half-hour market of one checklist day (defaults to today, UTC)."""
        pass
