"""
Aura Market Engine

Turns a timeline of life events into a deterministic candlestick market,
its technical indicators and a rule-based sentiment read.
"""

__version__ = "0.1.0"
