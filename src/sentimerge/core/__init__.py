"""Core utilities: logging, exceptions, constants."""

from sentimerge.core.exceptions import SentimergeError
from sentimerge.core.logging import get_logger, setup_logging

__all__ = [
    "SentimergeError",
    "get_logger",
    "setup_logging",
]
