"""Built-in lexicons and negation markers."""

from collections.abc import Mapping
from types import MappingProxyType

from sentimerge.core.exceptions import UnknownLexiconError
from sentimerge.lexicons.languages import (
    ENGLISH_LEXICON,
    FRENCH_LEXICON,
    GERMAN_LEXICON,
    INTENSIFIER_LEXICON,
    ITALIAN_LEXICON,
    SPANISH_LEXICON,
)
from sentimerge.lexicons.negations import NEGATIONS
from sentimerge.lexicons.symbols import EMOJI_LEXICON

# Registry order is the default merge order
BUILTIN_LEXICONS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "spanish": SPANISH_LEXICON,
        "english": ENGLISH_LEXICON,
        "french": FRENCH_LEXICON,
        "german": GERMAN_LEXICON,
        "italian": ITALIAN_LEXICON,
        "emoji": EMOJI_LEXICON,
        "intensifiers": INTENSIFIER_LEXICON,
    }
)


def load_builtin(name: str) -> dict[str, float]:
    """Return a copy of a built-in lexicon by name.

    Raises:
        UnknownLexiconError: If no built-in lexicon has that name.
    """
    key = name.strip().lower()
    if key not in BUILTIN_LEXICONS:
        available = ", ".join(BUILTIN_LEXICONS)
        raise UnknownLexiconError(f"Unknown lexicon '{name}' (available: {available})")
    return dict(BUILTIN_LEXICONS[key])


__all__ = [
    "BUILTIN_LEXICONS",
    "EMOJI_LEXICON",
    "ENGLISH_LEXICON",
    "FRENCH_LEXICON",
    "GERMAN_LEXICON",
    "INTENSIFIER_LEXICON",
    "ITALIAN_LEXICON",
    "NEGATIONS",
    "SPANISH_LEXICON",
    "load_builtin",
]
