"""Lexicon-based sentiment scoring.

This module contains:
- Lexicon coercion, file loading and multi-lexicon merge
- Tokenizer and modifier-aware scanner
- Punctuation/caps amplifier and normalizer
- SentimentAnalyzer facade with batch scoring and lexicon statistics
"""

from sentimerge.processing.sentiment.analyzer import (
    SentimentAnalyzer,
    create_sentiment_analyzer,
    dictionary_stats,
)
from sentimerge.processing.sentiment.lexicon import (
    CollisionStrategy,
    coerce_lexicon,
    load_lexicon_file,
    merge_lexicons,
)
from sentimerge.processing.sentiment.models import (
    AnalysisResult,
    DictionaryStats,
    ScanResult,
)
from sentimerge.processing.sentiment.scanner import scan
from sentimerge.processing.sentiment.scoring import amplify, normalize
from sentimerge.processing.sentiment.tokenizer import tokenize

__all__ = [
    # Analyzer
    "SentimentAnalyzer",
    "create_sentiment_analyzer",
    "dictionary_stats",
    # Lexicon
    "CollisionStrategy",
    "coerce_lexicon",
    "load_lexicon_file",
    "merge_lexicons",
    # Models
    "AnalysisResult",
    "DictionaryStats",
    "ScanResult",
    # Pipeline stages
    "amplify",
    "normalize",
    "scan",
    "tokenize",
]
