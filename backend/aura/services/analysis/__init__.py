"""
Analysis Engine Service

CONTRACT:
    Input:  AnalysisRequest (OHLC candles)
    Output: AnalysisResult

Rule-based sentiment, confidence and target projection.
"""

from aura.services.analysis.engine import analyze_market
from aura.services.analysis.service import AnalysisService, get_analysis_service

__all__ = [
    "analyze_market",
    "AnalysisService",
    "get_analysis_service",
]
