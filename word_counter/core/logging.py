"""
Word Counter Service - Structured Logging Module

Patterns Applied:
- One-time configure_logging() at startup
- structlog BoundLogger with JSON output
- Context variables carry the word being counted into every event logged
  while it is validated, resolved and counted

Word fields come straight from callers and are capped at
MAX_LOGGED_WORD_LENGTH characters before rendering.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Final

import structlog
from structlog.typing import EventDict

from word_counter import __version__

SERVICE_NAME: Final[str] = "word-counter-service"

MAX_LOGGED_WORD_LENGTH: Final[int] = 64
WORD_FIELDS: Final[tuple[str, ...]] = (
    "word",
    "canonical_form",
    "candidate",
    "counted_word",
    "invalid_word",
)
TRUNCATION_MARKER: Final[str] = "..."

# Module-level flag for one-time configuration
_configured: bool = False
_environment: str = "development"


def add_service_info(
    logger: logging.Logger,  # noqa: ARG001 - Required by structlog interface
    method_name: str,  # noqa: ARG001 - Required by structlog interface
    event_dict: EventDict,
) -> EventDict:
    """Stamp service name, version and environment on every event."""
    event_dict["service"] = SERVICE_NAME
    event_dict["version"] = __version__
    event_dict["environment"] = _environment
    return event_dict


def truncate_word_fields(
    logger: logging.Logger,  # noqa: ARG001 - Required by structlog interface
    method_name: str,  # noqa: ARG001 - Required by structlog interface
    event_dict: EventDict,
) -> EventDict:
    """Cap caller-supplied word fields at MAX_LOGGED_WORD_LENGTH.

    Non-string values (None for a missing word) pass through untouched.
    """
    for field in WORD_FIELDS:
        value = event_dict.get(field)
        if isinstance(value, str) and len(value) > MAX_LOGGED_WORD_LENGTH:
            event_dict[field] = value[:MAX_LOGGED_WORD_LENGTH] + TRUNCATION_MARKER
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = True,
    environment: str = "development",
) -> None:
    """Configure structlog for the application.

    Later calls are no-ops until reset_logging() is called.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: JSON renderer if True, console renderer otherwise
        environment: Deployment environment stamped on every event
    """
    global _configured, _environment

    if _configured:
        return

    _environment = environment
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_service_info,
            truncate_word_fields,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str) -> Any:
    """Get a structlog logger for name (typically the module name)."""
    return structlog.get_logger(name)


@contextmanager
def counting_context(word: str) -> Iterator[None]:
    """Bind counted_word for every event logged inside the block.

    Resolver and translator events emitted while a word is being counted
    then carry the word that triggered them.
    """
    with structlog.contextvars.bound_contextvars(counted_word=word):
        yield


def reset_logging() -> None:
    """Reset logging configuration for testing."""
    global _configured, _environment
    _configured = False
    _environment = "development"
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
