"""Pytest fixtures and configuration."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from sentimerge.config import get_settings
from sentimerge.processing.sentiment import SentimentAnalyzer


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the developer's environment and cached settings."""
    for var in (
        "SENTIMERGE_ENV",
        "SENTIMERGE_LOG_LEVEL",
        "SENTIMERGE_COLLISION_STRATEGY",
        "SENTIMERGE_LEXICONS",
        "SENTIMERGE_LEXICON_FILES",
        "SENTIMERGE_EXTRA_NEGATIONS",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def small_lexicon() -> dict[str, float]:
    """Hand-sized lexicon with words, intensifiers and a zero entry."""
    return {
        "good": 3.0,
        "great": 3.0,
        "love": 3.0,
        "bad": -3.0,
        "allergic": -2.0,
        "very": 0.8,
        "really": 0.5,
        "meh": 0.0,
    }


@pytest.fixture
def analyzer(small_lexicon: dict[str, float]) -> SentimentAnalyzer:
    """Analyzer over the small lexicon with the default negation set."""
    return SentimentAnalyzer(small_lexicon)


@pytest.fixture(autouse=True)
def silence_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop log output so it never mixes with captured CLI output."""
    monkeypatch.setattr("sentimerge.cli.setup_logging", lambda settings, **kwargs: None)
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    yield
    structlog.reset_defaults()
