"""
Market Synthesis Service Implementation

Events -> hourly master series -> {timeframe candles, session summary}.
Deterministic: identical inputs produce identical output.
"""

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from aura.core.config import SynthesisConfig, get_settings
from aura.schemas.market import (
    ChecklistTask,
    IntradayMarket,
    LifeEvent,
    MarketHistory,
    MarketRequest,
    Timeframe,
)
from aura.services.synthesis.aggregator import aggregate
from aura.services.synthesis.builder import build_hourly_series, clamp_score
from aura.services.synthesis.intraday import generate_intraday_market
from aura.services.synthesis.interface import MarketSynthesisServiceInterface
from aura.services.synthesis.summary import period_name, summarize

logger = logging.getLogger(__name__)


def generate_market_history(
    initial_score: float,
    events: Sequence[LifeEvent],
    timeframe: Timeframe = Timeframe.D1,
    *,
    now: Optional[datetime] = None,
    config: Optional[SynthesisConfig] = None,
) -> MarketHistory:
    """
    Synthesize candles, summary and period label from life events.

    Never raises for in-domain inputs; an empty event list yields a pure
    noise session over the default lookback window.
    """
    config = config or SynthesisConfig()
    timeframe = Timeframe(timeframe)
    initial_score = clamp_score(initial_score)

    master = build_hourly_series(initial_score, events, now=now, config=config)

    return MarketHistory(
        history=aggregate(master, timeframe),
        summary=summarize(initial_score, master, config.liquidation_threshold),
        period_name=period_name(events),
        timeframe=timeframe,
    )


class MarketSynthesisService(MarketSynthesisServiceInterface):
    """
    Market Synthesis Service.

    Thin stateful shell around `generate_market_history` that carries the
    engine configuration.
    """

    def __init__(self, config: Optional[SynthesisConfig] = None):
        self._config = config or SynthesisConfig()

    @property
    def config(self) -> SynthesisConfig:
        return self._config

    def execute(self, input_data: MarketRequest) -> MarketHistory:
        """Synthesize the market described by a request."""
        return self.generate(
            input_data.initial_score, input_data.events, input_data.timeframe
        )

    def generate(
        self,
        initial_score: float,
        events: Sequence[LifeEvent],
        timeframe: Timeframe = Timeframe.D1,
        now: Optional[datetime] = None,
    ) -> MarketHistory:
        """Synthesize a market from raw inputs."""
        result = generate_market_history(
            initial_score, events, timeframe, now=now, config=self._config
        )
        logger.info(
            f"Synthesized {len(result.history)} {result.timeframe.value} candles "
            f"from {len(events)} events (close={result.summary.close}, "
            f"roe={result.summary.roe}%)"
        )
        return result

    def intraday(
        self, tasks: Sequence[ChecklistTask], day: Optional[date] = None
    ) -> IntradayMarket:
        """Half-hour market of a single checklist day."""
        result = generate_intraday_market(tasks, day)
        logger.info(
            f"Intraday market for {result.day}: {len(tasks)} tasks, "
            f"change={result.change_percent}%"
        )
        return result


# Singleton instance
_service_instance: Optional[MarketSynthesisService] = None


def get_synthesis_service() -> MarketSynthesisService:
    """Get or create synthesis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = MarketSynthesisService(get_settings().synthesis)
    return _service_instance
