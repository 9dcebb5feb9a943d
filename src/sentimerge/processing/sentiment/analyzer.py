"""Multi-lexicon sentiment analyzer.

Inspired by VADER (Valence Aware Dictionary and sEntiment Reasoner): AFINN-style
word valences extended with negation, intensifiers and punctuation/caps emphasis.
Works across languages without language detection by merging several
per-language lexicons into one.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from sentimerge.core.logging import get_logger
from sentimerge.lexicons import NEGATIONS, load_builtin
from sentimerge.processing.sentiment.lexicon import (
    CollisionStrategy,
    coerce_lexicon,
    load_lexicon_file,
    merge_lexicons,
)
from sentimerge.processing.sentiment.models import AnalysisResult, DictionaryStats
from sentimerge.processing.sentiment.scanner import scan
from sentimerge.processing.sentiment.scoring import amplify, normalize
from sentimerge.processing.sentiment.tokenizer import tokenize

if TYPE_CHECKING:
    from sentimerge.config import Settings

logger = get_logger(__name__)


def dictionary_stats(lexicon: Mapping[str, float]) -> DictionaryStats:
    """Count positive/negative/neutral entries and average valence.

    An empty lexicon reports an average of 0.0.
    """
    values = list(lexicon.values())
    total = len(values)
    return DictionaryStats(
        total_words=total,
        positive=sum(1 for v in values if v > 0),
        negative=sum(1 for v in values if v < 0),
        neutral=sum(1 for v in values if v == 0),
        avg_score=sum(values) / total if total else 0.0,
    )


class SentimentAnalyzer:
    """Lexicon-based sentiment analyzer over a unified multi-language lexicon.

    The lexicon and negation set are fixed at construction and only read
    afterwards, so one instance can score texts from several threads. All
    per-text state lives inside a single ``scan`` call.
    """

    def __init__(
        self,
        lexicon: Mapping[str, float],
        negations: Iterable[str] | None = None,
    ) -> None:
        """Initialize analyzer.

        Args:
            lexicon: Unified lexicon with lower-cased keys and float values.
            negations: Negation markers, defaults to the built-in multi-language set.
        """
        self._lexicon: Mapping[str, float] = MappingProxyType(dict(lexicon))
        self._negations: frozenset[str] = (
            frozenset(w.lower() for w in negations) if negations is not None else NEGATIONS
        )

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    @classmethod
    def from_lexicons(
        cls,
        lexicons: Iterable[Mapping[str, float] | None],
        strategy: CollisionStrategy | str = CollisionStrategy.average,
        negations: Iterable[str] | None = None,
    ) -> SentimentAnalyzer:
        """Merge normalized lexicons and build an analyzer."""
        return cls(merge_lexicons(lexicons, strategy), negations=negations)

    @classmethod
    def from_sources(
        cls,
        *,
        spanish: Mapping[Any, Any] | None = None,
        english: Mapping[Any, Any] | None = None,
        french: Mapping[Any, Any] | None = None,
        german: Mapping[Any, Any] | None = None,
        italian: Mapping[Any, Any] | None = None,
        emojis: Mapping[Any, Any] | None = None,
        emoticons: Mapping[Any, Any] | None = None,
        strategy: CollisionStrategy | str = CollisionStrategy.average,
        negations: Iterable[str] | None = None,
    ) -> SentimentAnalyzer:
        """Build an analyzer from raw per-language mappings.

        Each present mapping is coerced to lower-cased string keys and float
        values. Merge order is the parameter order, which matters for the
        ``first`` strategy.
        """
        sources = (spanish, english, french, german, italian, emojis, emoticons)
        lexicons = [coerce_lexicon(s) for s in sources if s is not None]
        return cls.from_lexicons(lexicons, strategy=strategy, negations=negations)

    @classmethod
    def from_unified_lexicon(
        cls,
        lexicon: Mapping[Any, Any],
        negations: Iterable[str] | None = None,
    ) -> SentimentAnalyzer:
        """Build an analyzer from an already merged raw mapping."""
        return cls(coerce_lexicon(lexicon), negations=negations)

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    def score(self, text: str) -> float:
        """Score text from -1.0 (most negative) to 1.0 (most positive).

        Args:
            text: Text to score.

        Returns:
            Normalized score; 0.0 for empty text or text with no lexicon hits.
        """
        if not text:
            return 0.0

        result = scan(tokenize(text), self._lexicon, self._negations)
        return normalize(result.raw_score, result.count, amplify(text))

    def analyze(self, text: str, include_tokens: bool = False) -> AnalysisResult:
        """Analyze text with per-word details.

        Args:
            text: Text to analyze.
            include_tokens: Include the token list in the result.

        Returns:
            AnalysisResult for the text.
        """
        if not text:
            return AnalysisResult.neutral()

        tokens = tokenize(text)
        result = scan(tokens, self._lexicon, self._negations)
        multiplier = amplify(text)
        score = normalize(result.raw_score, result.count, multiplier)

        return AnalysisResult(
            score=score,
            comparative=score / len(tokens) if tokens else 0.0,
            tokens=tuple(tokens) if include_tokens else (),
            positive=result.positive,
            negative=result.negative,
            raw_score=result.raw_score * multiplier,
            word_count=result.count,
        )

    def batch_score(self, texts: Sequence[str]) -> list[float]:
        """Score each text independently, preserving order."""
        scores = [self.score(text) for text in texts]
        logger.debug("Batch scored", texts=len(texts))
        return scores

    def batch_analysis(
        self,
        texts: Sequence[str],
        include_tokens: bool = False,
    ) -> list[AnalysisResult]:
        """Analyze each text independently, preserving order."""
        results = [self.analyze(text, include_tokens=include_tokens) for text in texts]
        logger.debug("Batch analyzed", texts=len(texts), include_tokens=include_tokens)
        return results

    def dictionary_stats(self) -> DictionaryStats:
        """Statistics over the unified lexicon."""
        return dictionary_stats(self._lexicon)

    @property
    def lexicon(self) -> Mapping[str, float]:
        """Read-only view of the unified lexicon."""
        return self._lexicon

    @property
    def negations(self) -> frozenset[str]:
        """Negation markers used by this analyzer."""
        return self._negations


def create_sentiment_analyzer(settings: Settings | None = None) -> SentimentAnalyzer:
    """Build an analyzer from configured built-in lexicons and lexicon files.

    Args:
        settings: Settings to use, defaults to ``get_settings()``.

    Returns:
        Configured SentimentAnalyzer.
    """
    if settings is None:
        from sentimerge.config import get_settings

        settings = get_settings()

    lexicons = [load_builtin(name) for name in settings.lexicons]
    lexicons.extend(load_lexicon_file(path) for path in settings.lexicon_files)
    negations = NEGATIONS | frozenset(settings.extra_negations)

    analyzer = SentimentAnalyzer.from_lexicons(
        lexicons,
        strategy=settings.collision_strategy,
        negations=negations,
    )
    logger.info(
        "Sentiment analyzer created",
        lexicons=list(settings.lexicons),
        lexicon_files=[str(p) for p in settings.lexicon_files],
        strategy=settings.collision_strategy.value,
        entries=len(analyzer.lexicon),
    )
    return analyzer
