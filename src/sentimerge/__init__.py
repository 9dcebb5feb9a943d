"""Sentimerge - multi-lexicon, modifier-aware sentiment scoring."""

from sentimerge.processing.sentiment import (
    AnalysisResult,
    CollisionStrategy,
    DictionaryStats,
    SentimentAnalyzer,
    create_sentiment_analyzer,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "CollisionStrategy",
    "DictionaryStats",
    "SentimentAnalyzer",
    "create_sentiment_analyzer",
]
