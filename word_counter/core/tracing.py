"""
Word Counter Service - OpenTelemetry Tracing Module

Patterns Applied:
- One-time configure_tracing() at startup
- One span per remote translation sweep, opened by remote_lookup_span()

Until configure_tracing() runs, the global tracer provider is the
OpenTelemetry no-op one, so the resolver opens spans unconditionally.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Final

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

from word_counter import __version__

SERVICE_NAME: Final[str] = "word-counter-service"

# Span names and attributes
SPAN_REMOTE_LOOKUP: Final[str] = "resolver.remote_lookup"
ATTR_WORD: Final[str] = "word_counter.word"
ATTR_TARGET_LANGUAGE: Final[str] = "word_counter.target_language"
ATTR_LANGUAGES_TRIED: Final[str] = "word_counter.languages_tried"
ATTR_SOURCE_LANGUAGE: Final[str] = "word_counter.source_language"
ATTR_CANONICAL_FORM: Final[str] = "word_counter.canonical_form"
ATTR_ACCEPTED: Final[str] = "word_counter.accepted"

# Module-level flag for one-time configuration
_configured: bool = False


def configure_tracing(
    service_name: str = SERVICE_NAME,
    console_export: bool = False,
    environment: str = "development",
) -> None:
    """Install the global TracerProvider.

    Args:
        service_name: Name of the service for trace attribution
        console_export: Whether to export spans to console (for development)
        environment: Recorded as deployment.environment on the resource
    """
    global _configured

    if _configured:
        return

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": __version__,
            "deployment.environment": environment,
        }
    )

    provider = TracerProvider(resource=resource)

    if console_export:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    _configured = True


def get_tracer(name: str) -> Any:
    return trace.get_tracer(name)


@contextmanager
def remote_lookup_span(
    word: str,
    target_language: str,
    tracer: Any = None,
) -> Iterator[Any]:
    """Open the span covering one remote translation sweep for word.

    The span starts with ATTR_ACCEPTED false; record_remote_attempt() and
    record_remote_match() fill in the rest.

    Args:
        word: Normalized word being resolved
        target_language: Language canonical forms are expressed in
        tracer: Tracer to use. The module tracer if None.
    """
    active_tracer = tracer or get_tracer(__name__)
    with active_tracer.start_as_current_span(SPAN_REMOTE_LOOKUP) as span:
        span.set_attribute(ATTR_WORD, word)
        span.set_attribute(ATTR_TARGET_LANGUAGE, target_language)
        span.set_attribute(ATTR_LANGUAGES_TRIED, 0)
        span.set_attribute(ATTR_ACCEPTED, False)
        yield span


def record_remote_attempt(span: Any, attempts: int) -> None:
    span.set_attribute(ATTR_LANGUAGES_TRIED, attempts)


def record_remote_match(span: Any, source_language: str, canonical_form: str) -> None:
    """Mark the sweep as answered by source_language."""
    span.set_attribute(ATTR_ACCEPTED, True)
    span.set_attribute(ATTR_SOURCE_LANGUAGE, source_language)
    span.set_attribute(ATTR_CANONICAL_FORM, canonical_form)


def reset_tracing() -> None:
    """Reset tracing configuration for testing."""
    global _configured
    _configured = False
