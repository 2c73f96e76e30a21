"""
Analysis Service

Service wrapper around the analysis engine.
"""

import logging
from typing import Optional, Sequence

from aura.schemas.analysis import AnalysisRequest, AnalysisResult
from aura.schemas.market import OHLC
from aura.services.analysis.engine import analyze_market
from aura.services.base import BaseService

logger = logging.getLogger(__name__)


class AnalysisService(BaseService[AnalysisRequest, AnalysisResult]):
    """Sentiment analysis of a candle series. Stateless."""

    @property
    def name(self) -> str:
        return "AnalysisService"

    def execute(self, input_data: AnalysisRequest) -> AnalysisResult:
        return self.analyze(input_data.history)

    def analyze(self, history: Sequence[OHLC]) -> AnalysisResult:
        result = analyze_market(history)
        logger.info(
            f"Analysis: {result.sentiment.value} (score={result.score}, "
            f"confidence={result.confidence}%) over {len(history)} candles"
        )
        return result


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance
