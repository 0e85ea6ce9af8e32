"""
Tests for Settings and the one-time logging/tracing setup.

- TestSettingsDefaults
- TestEnvironmentOverrides: WC_ prefixed variables
- TestSourceLanguages: normalization and rejection
- TestStructuredLogging: configure_logging() idempotency
- TestWordFieldTruncation: caller-supplied words capped in log events
- TestCountingContext: counted_word bound while a word is counted
- TestTracing: remote lookup span attributes
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from pydantic import ValidationError

from word_counter import __version__
from word_counter.core import logging as log_module
from word_counter.core import tracing as tracing_module
from word_counter.core.config import DEFAULT_SOURCE_LANGUAGES, Settings, get_settings
from word_counter.core.logging import (
    MAX_LOGGED_WORD_LENGTH,
    configure_logging,
    counting_context,
    get_logger,
    reset_logging,
    truncate_word_fields,
)
from word_counter.core.tracing import (
    ATTR_ACCEPTED,
    ATTR_CANONICAL_FORM,
    ATTR_LANGUAGES_TRIED,
    ATTR_SOURCE_LANGUAGE,
    ATTR_WORD,
    SPAN_REMOTE_LOOKUP,
    record_remote_attempt,
    remote_lookup_span,
)
from word_counter.translation import (
    FakeTranslator,
    OfflineTranslator,
    StaticDictionary,
    TieredResolver,
    TranslationResult,
)

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """Run from an empty directory so no .env file leaks into Settings."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "WC_PORT",
        "WC_TRANSLATION_ENABLED",
        "WC_TRANSLATION_TIMEOUT",
        "WC_SOURCE_LANGUAGES",
        "WC_CONFIDENCE_THRESHOLD",
        "WC_COUNT_SHARDS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def fresh_logging() -> Iterator[None]:
    reset_logging()
    yield
    reset_logging()


# =============================================================================
# TestSettingsDefaults
# =============================================================================


class TestSettingsDefaults:
    """Defaults with no environment overrides."""

    def test_translation_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = get_settings()

        assert settings.translation_enabled is True
        assert settings.translation_timeout == 5.0
        assert settings.confidence_threshold == 0.7
        assert settings.target_language == "en"
        assert settings.static_translations_path is None

    def test_default_language_order(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings()

        assert settings.source_languages == [
            "es", "de", "fr", "it", "pt", "nl", "ru", "zh", "ja", "ko",
        ]

    def test_default_languages_not_shared(self, clean_env: pytest.MonkeyPatch) -> None:
        """Each Settings gets its own list."""
        settings = Settings()
        settings.source_languages.append("sv")

        assert "sv" not in DEFAULT_SOURCE_LANGUAGES
        assert "sv" not in Settings().source_languages

    def test_server_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings()

        assert settings.port == 8080
        assert settings.service_name == "word-counter-service"
        assert settings.count_shards == 16


# =============================================================================
# TestEnvironmentOverrides
# =============================================================================


class TestEnvironmentOverrides:
    """WC_ prefixed variables override defaults."""

    def test_scalar_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("WC_PORT", "9090")
        clean_env.setenv("WC_TRANSLATION_ENABLED", "false")
        clean_env.setenv("WC_TRANSLATION_TIMEOUT", "2.5")

        settings = Settings()

        assert settings.port == 9090
        assert settings.translation_enabled is False
        assert settings.translation_timeout == 2.5

    def test_language_list_from_json(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("WC_SOURCE_LANGUAGES", '["es", "de"]')

        assert Settings().source_languages == ["es", "de"]

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("WC_CONFIDENCE_THRESHOLD", "1.5"),
            ("WC_TRANSLATION_TIMEOUT", "0"),
            ("WC_COUNT_SHARDS", "0"),
        ],
    )
    def test_out_of_range_rejected(
        self, clean_env: pytest.MonkeyPatch, name: str, value: str
    ) -> None:
        clean_env.setenv(name, value)

        with pytest.raises(ValidationError):
            Settings()


# =============================================================================
# TestSourceLanguages
# =============================================================================


class TestSourceLanguages:
    """source_languages validation."""

    def test_codes_lowercased_and_blanks_dropped(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        settings = Settings(source_languages=[" ES ", "", "De", "  "])

        assert settings.source_languages == ["es", "de"]

    @pytest.mark.parametrize("languages", [[], ["", "  "]])
    def test_empty_list_rejected(
        self, clean_env: pytest.MonkeyPatch, languages: list[str]
    ) -> None:
        with pytest.raises(ValidationError, match="source language"):
            Settings(source_languages=languages)


# =============================================================================
# TestStructuredLogging
# =============================================================================


class TestStructuredLogging:
    """configure_logging() runs once until reset."""

    def test_sets_configured_flag(self, fresh_logging: None) -> None:
        configure_logging(log_level="DEBUG", json_output=False)

        assert log_module._configured is True

    def test_second_call_is_noop(self, fresh_logging: None, monkeypatch) -> None:
        configure_logging()
        calls: list[dict] = []
        monkeypatch.setattr(
            log_module.structlog, "configure", lambda **kw: calls.append(kw)
        )

        configure_logging()

        assert calls == []

    def test_reset_clears_flag(self, fresh_logging: None) -> None:
        configure_logging()
        reset_logging()

        assert log_module._configured is False

    def test_logger_binds_context(self, fresh_logging: None) -> None:
        configure_logging()
        logger = get_logger("test")

        assert logger.bind(word="flower") is not None

    def test_service_info_processor(self, fresh_logging: None) -> None:
        configure_logging(environment="production")

        event = log_module.add_service_info(None, "info", {"event": "word_added"})

        assert event["service"] == "word-counter-service"
        assert event["version"] == __version__
        assert event["environment"] == "production"


# =============================================================================
# TestWordFieldTruncation
# =============================================================================


class TestWordFieldTruncation:
    """truncate_word_fields() caps caller-supplied words."""

    def test_long_word_truncated(self) -> None:
        long_word = "a" * (MAX_LOGGED_WORD_LENGTH + 10)

        event = truncate_word_fields(None, "info", {"invalid_word": long_word})

        assert event["invalid_word"] == "a" * MAX_LOGGED_WORD_LENGTH + "..."

    def test_short_and_missing_values_untouched(self) -> None:
        event = truncate_word_fields(
            None, "info", {"word": "flor", "invalid_word": None, "count": 3}
        )

        assert event == {"word": "flor", "invalid_word": None, "count": 3}

    def test_non_word_fields_untouched(self) -> None:
        message = "x" * (MAX_LOGGED_WORD_LENGTH * 2)

        event = truncate_word_fields(None, "info", {"error": message})

        assert event["error"] == message


# =============================================================================
# TestCountingContext
# =============================================================================


class TestCountingContext:
    """counting_context() binds the counted word for the block only."""

    def test_binds_and_unbinds(self) -> None:
        with counting_context("flor"):
            assert structlog.contextvars.get_contextvars()["counted_word"] == "flor"

        assert "counted_word" not in structlog.contextvars.get_contextvars()


# =============================================================================
# TestTracing
# =============================================================================


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter: InMemorySpanExporter):
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("test")


class TestTracing:
    """Remote lookup spans."""

    def test_span_without_configuration(self) -> None:
        with remote_lookup_span("hund", "en") as span:
            record_remote_attempt(span, 1)

    def test_accepted_lookup_attributes(
        self, tracer, span_exporter: InMemorySpanExporter
    ) -> None:
        resolver = TieredResolver(
            translator=FakeTranslator(
                responses={("hund", "de"): TranslationResult("Dog", 0.9, "de", "en")}
            ),
            static_dictionary=StaticDictionary(),
            source_languages=("es", "de", "fr"),
            tracer=tracer,
        )

        resolver.resolve("hund")

        (span,) = span_exporter.get_finished_spans()
        assert span.name == SPAN_REMOTE_LOOKUP
        assert span.attributes[ATTR_WORD] == "hund"
        assert span.attributes[ATTR_LANGUAGES_TRIED] == 2
        assert span.attributes[ATTR_ACCEPTED] is True
        assert span.attributes[ATTR_SOURCE_LANGUAGE] == "de"
        assert span.attributes[ATTR_CANONICAL_FORM] == "dog"

    def test_unanswered_lookup_attributes(
        self, tracer, span_exporter: InMemorySpanExporter
    ) -> None:
        resolver = TieredResolver(
            translator=OfflineTranslator(),
            static_dictionary=StaticDictionary(),
            source_languages=("es", "de"),
            tracer=tracer,
        )

        resolver.resolve("zebra")
        resolver.resolve("zebra")

        (span,) = span_exporter.get_finished_spans()
        assert span.attributes[ATTR_LANGUAGES_TRIED] == 2
        assert span.attributes[ATTR_ACCEPTED] is False
        assert ATTR_SOURCE_LANGUAGE not in span.attributes

    def test_reset_tracing_clears_flag(self) -> None:
        tracing_module._configured = True
        tracing_module.reset_tracing()

        assert tracing_module._configured is False
