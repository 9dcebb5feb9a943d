"""Structured logging configuration with structlog."""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from sentimerge.config import Settings


def resolve_log_level(settings: "Settings", quiet: bool = False) -> int:
    """Numeric level to log at.

    Quiet runs (the CLI without ``--verbose``) never go below WARNING, so
    lexicon loading chatter stays out of pipelines consuming the JSON output.
    """
    level: int = getattr(logging, settings.log_level)
    if quiet:
        return max(level, logging.WARNING)
    return level


def setup_logging(
    settings: "Settings",
    *,
    quiet: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog and stdlib logging.

    Args:
        settings: Application settings (env selects console vs JSON rendering).
        quiet: Raise the threshold to at least WARNING.
        stream: Destination, defaults to stderr so stdout stays machine-readable.
    """
    stream = stream if stream is not None else sys.stderr
    level = resolve_log_level(settings, quiet=quiet)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.env == "development":
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=stream.isatty()),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[logging.StreamHandler(stream)],
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
