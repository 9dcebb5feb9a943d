"""Custom exceptions for Sentimerge."""


class SentimergeError(Exception):
    """Base exception for all Sentimerge errors."""

    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(message, *args)


# Lexicon errors
class LexiconError(SentimergeError):
    """Base error for lexicon handling."""


class LexiconLoadError(LexiconError):
    """Lexicon file is missing or not a valid JSON object."""


class InvalidValenceError(LexiconError):
    """A lexicon entry has a non-numeric valence."""


class UnknownLexiconError(LexiconError):
    """No built-in lexicon with the requested name."""


# Configuration errors
class ConfigurationError(SentimergeError):
    """Invalid configuration value."""
