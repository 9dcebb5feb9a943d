"""Data models for sentiment scoring.

This module defines:
- Per-text analysis result records
- Lexicon statistics
- Scanner output and per-scan state
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sentimerge.core.constants import BASE_INTENSIFIER_FACTOR, SCORE_MAX, SCORE_MIN

# (token, original valence before intensifier/negation)
WordHit = tuple[str, float]


# =============================================================================
# Analysis Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Result of analyzing a single text.

    Attributes:
        score: Normalized sentiment from -1.0 (most negative) to 1.0 (most positive).
        comparative: ``score`` divided by the number of tokens (0.0 without tokens).
        tokens: Tokens of the text, only populated when requested.
        positive: Words that contributed positively, with their lexicon valence.
        negative: Words that contributed negatively, with their lexicon valence.
        raw_score: Accumulated score after the punctuation/caps multiplier,
            before normalization.
        word_count: Number of sentiment-bearing tokens.
    """

    score: float
    comparative: float = 0.0
    tokens: tuple[str, ...] = field(default_factory=tuple)
    positive: tuple[WordHit, ...] = field(default_factory=tuple)
    negative: tuple[WordHit, ...] = field(default_factory=tuple)
    raw_score: float = 0.0
    word_count: int = 0

    def __post_init__(self) -> None:
        """Validate score range."""
        if not SCORE_MIN <= self.score <= SCORE_MAX:
            raise ValueError(f"score must be in [{SCORE_MIN}, {SCORE_MAX}], got {self.score}")
        if self.word_count < 0:
            raise ValueError(f"word_count must be >= 0, got {self.word_count}")

    @classmethod
    def neutral(cls) -> AnalysisResult:
        """Result for text with no tokens."""
        return cls(score=0.0)

    @property
    def label(self) -> str:
        """Return ``positive``, ``negative`` or ``neutral``."""
        if self.score > 0:
            return "positive"
        if self.score < 0:
            return "negative"
        return "neutral"

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase record keys."""
        return {
            "score": self.score,
            "comparative": self.comparative,
            "tokens": list(self.tokens),
            "positive": [[word, valence] for word, valence in self.positive],
            "negative": [[word, valence] for word, valence in self.negative],
            "rawScore": self.raw_score,
            "wordCount": self.word_count,
        }


# =============================================================================
# Lexicon Statistics
# =============================================================================


@dataclass(frozen=True, slots=True)
class DictionaryStats:
    """Aggregate statistics over a lexicon."""

    total_words: int
    positive: int
    negative: int
    neutral: int
    avg_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalWords": self.total_words,
            "positive": self.positive,
            "negative": self.negative,
            "neutral": self.neutral,
            "avgScore": self.avg_score,
        }


# =============================================================================
# Scanner
# =============================================================================


@dataclass(slots=True)
class ScanState:
    """Mutable state for one scan of one token stream.

    Never stored on an analyzer or reused across texts.
    """

    negated: bool = False
    intensifier_factor: float = BASE_INTENSIFIER_FACTOR
    score: float = 0.0
    count: int = 0
    positive: list[WordHit] = field(default_factory=list)
    negative: list[WordHit] = field(default_factory=list)

    def reset_modifiers(self) -> None:
        self.negated = False
        self.intensifier_factor = BASE_INTENSIFIER_FACTOR


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Output of scanning a token stream."""

    raw_score: float
    count: int
    positive: tuple[WordHit, ...] = field(default_factory=tuple)
    negative: tuple[WordHit, ...] = field(default_factory=tuple)
