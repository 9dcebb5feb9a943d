"""Text tokenization."""

import re

# Word runs (Unicode letters, digits, underscore) or any single other
# non-space symbol, so punctuation and emoji become standalone tokens.
_TOKEN_PATTERN = re.compile(r"\w+|[^\s\w]")


def tokenize(text: str) -> list[str]:
    """Split lower-cased text into word and symbol tokens, left to right.

    Args:
        text: Raw text.

    Returns:
        Tokens in order of appearance; empty for empty text.
    """
    if not text:
        return []
    return _TOKEN_PATTERN.findall(text.lower())
