"""Logging configuration for the entry point. Library modules only create loggers."""

import logging
import sys
from typing import Optional

from src.core.config import LOG_FORMAT, LOG_LEVEL

FALLBACK_LOG_LEVEL = "WARNING"


def resolve_level(level: str) -> str:
    """Upper-cased level name, or WARNING for names the logging module doesn't know."""
    name = level.upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return FALLBACK_LOG_LEVEL


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr, so they never mix with the path printed on stdout."""
    requested = level or LOG_LEVEL
    resolved = resolve_level(requested)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    if resolved != requested.upper():
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using %s instead", requested, resolved
        )
