"""Lexicon adaptation, loading and merging.

Every source mapping passes through ``coerce_lexicon`` at the boundary so the
merger and scanner only ever see ``dict[str, float]`` with lower-cased keys.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import orjson

from sentimerge.core.exceptions import (
    ConfigurationError,
    InvalidValenceError,
    LexiconLoadError,
)
from sentimerge.core.logging import get_logger

logger = get_logger(__name__)


class CollisionStrategy(str, Enum):
    """How to resolve a token defined by more than one source lexicon."""

    average = "average"  # Mean of all contributed values
    max = "max"  # Most extreme value (largest magnitude)
    first = "first"  # First source wins, order matters
    conservative = "conservative"  # Least extreme value (smallest magnitude)

    @classmethod
    def parse(cls, value: str | CollisionStrategy) -> CollisionStrategy:
        """Parse a strategy name, case-insensitively.

        Raises:
            ConfigurationError: If the name is not a known strategy.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ConfigurationError(
                f"Unknown collision strategy '{value}' (choices: {choices})"
            ) from None


def coerce_lexicon(source: Mapping[Any, Any]) -> dict[str, float]:
    """Normalize a raw mapping into ``dict[str, float]`` with lower-cased keys.

    Keys are stringified and lower-cased; int and float values become floats.
    When two raw keys fold to the same lower-cased key, the later one wins.

    Args:
        source: Raw token to valence mapping.

    Returns:
        New normalized mapping; ``source`` is not modified.

    Raises:
        InvalidValenceError: If a value is not a real number (bools rejected).
    """
    converted: dict[str, float] = {}
    for key, value in source.items():
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidValenceError(
                f"Valence for '{key}' must be a number, got {type(value).__name__}"
            )
        converted[str(key).lower()] = float(value)
    return converted


def load_lexicon_file(path: Path | str) -> dict[str, float]:
    """Load a JSON object of token to valence from disk.

    Args:
        path: Path to a JSON file containing a single object.

    Returns:
        Normalized lexicon.

    Raises:
        LexiconLoadError: If the file is missing, unreadable or not a JSON object.
        InvalidValenceError: If a value is not numeric.
    """
    path = Path(path)
    try:
        data = orjson.loads(path.read_bytes())
    except OSError as e:
        raise LexiconLoadError(f"Cannot read lexicon file {path}: {e}") from e
    except orjson.JSONDecodeError as e:
        raise LexiconLoadError(f"Invalid JSON in lexicon file {path}: {e}") from e

    if not isinstance(data, dict):
        raise LexiconLoadError(
            f"Lexicon file {path} must contain a JSON object, got {type(data).__name__}"
        )

    lexicon = coerce_lexicon(data)
    logger.info("Lexicon file loaded", path=str(path), entries=len(lexicon))
    return lexicon


def _resolve(scores: list[float], strategy: CollisionStrategy) -> float:
    """Pick the unified value for one colliding key."""
    if strategy is CollisionStrategy.average:
        return sum(scores) / len(scores)
    if strategy is CollisionStrategy.max:
        # max/min return the earliest element on ties
        return max(scores, key=abs)
    if strategy is CollisionStrategy.conservative:
        return min(scores, key=abs)
    return scores[0]


def merge_lexicons(
    lexicons: Iterable[Mapping[str, float] | None],
    strategy: CollisionStrategy | str = CollisionStrategy.average,
) -> dict[str, float]:
    """Merge several lexicons into one, resolving key collisions.

    Args:
        lexicons: Normalized source lexicons in priority order. ``None``
            entries contribute nothing.
        strategy: Collision resolution strategy.

    Returns:
        New unified lexicon. Inputs are not modified.
    """
    strategy = CollisionStrategy.parse(strategy)
    unified: dict[str, float] = {}
    collisions: dict[str, list[float]] = {}
    sources = 0

    for lexicon in lexicons:
        if lexicon is None:
            continue
        sources += 1
        for word, valence in lexicon.items():
            if word in unified:
                collisions.setdefault(word, [unified[word]]).append(valence)
            else:
                unified[word] = valence

    if strategy is not CollisionStrategy.first:
        for word, scores in collisions.items():
            unified[word] = _resolve(scores, strategy)

    logger.debug(
        "Lexicons merged",
        sources=sources,
        entries=len(unified),
        collisions=len(collisions),
        strategy=strategy.value,
    )
    return unified
