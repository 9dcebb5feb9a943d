"""Punctuation/capitalization amplifier and score normalization."""

import math

from sentimerge.core.constants import (
    DOUBLE_EXCLAMATION,
    DOUBLE_EXCLAMATION_BOOST,
    SCORE_MAX,
    SCORE_MIN,
    SHOUTING_BOOST,
    SHOUTING_MIN_LENGTH,
    TRIPLE_EXCLAMATION,
    TRIPLE_EXCLAMATION_BOOST,
)


def amplify(text: str) -> float:
    """Calculate the emphasis multiplier for the original (non-lowered) text.

    ``!!!`` and ``!!`` are mutually exclusive boosts. Text longer than five
    characters that equals its upper-cased form counts as shouting; this
    includes text with no letters at all.

    Args:
        text: Original text.

    Returns:
        Multiplier, 1.0 when no rule fires.
    """
    multiplier = 1.0

    if TRIPLE_EXCLAMATION in text:
        multiplier *= TRIPLE_EXCLAMATION_BOOST
    elif DOUBLE_EXCLAMATION in text:
        multiplier *= DOUBLE_EXCLAMATION_BOOST

    if text == text.upper() and len(text) > SHOUTING_MIN_LENGTH:
        multiplier *= SHOUTING_BOOST

    return multiplier


def normalize(score: float, count: int, multiplier: float = 1.0) -> float:
    """Normalize an accumulated score to [-1, 1].

    Divides by the square root of the hit count so long texts don't win on
    volume alone, then clamps.

    Args:
        score: Raw accumulated score.
        count: Number of sentiment-bearing tokens.
        multiplier: Amplifier factor applied before scaling.

    Returns:
        Normalized score; 0.0 when ``count`` is zero.
    """
    if count == 0:
        return 0.0

    normalized = (score * multiplier) / math.sqrt(count)
    return max(SCORE_MIN, min(SCORE_MAX, normalized))
