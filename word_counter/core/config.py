"""
Word Counter Service - Application Configuration

Patterns Applied:
- Pydantic Settings with SettingsConfigDict
- Environment variable prefix WC_ for the word counter service
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE_LANGUAGES: list[str] = [
    "es",
    "de",
    "fr",
    "it",
    "pt",
    "nl",
    "ru",
    "zh",
    "ja",
    "ko",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables with WC_ prefix.
    Example: WC_TRANSLATION_TIMEOUT=2.5, WC_SOURCE_LANGUAGES='["es","de"]'
    """

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8080

    # Application metadata
    service_name: str = "word-counter-service"
    version: str = "0.1.0"
    environment: str = "development"

    # Logging configuration
    log_level: str = "INFO"
    log_json: bool = True

    # Tracing configuration
    tracing_enabled: bool = True
    tracing_console_export: bool = False

    # Translation configuration
    translation_enabled: bool = True
    translation_base_url: str = "https://api.mymemory.translated.net"
    translation_timeout: float = Field(default=5.0, gt=0.0)
    confidence_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    source_languages: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SOURCE_LANGUAGES)
    )
    target_language: str = "en"
    static_translations_path: str | None = None
    batch_max_workers: int = Field(default=8, ge=1)

    # Counting configuration
    count_shards: int = Field(default=16, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="WC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("source_languages")
    @classmethod
    def normalize_language_codes(cls, v: list[str]) -> list[str]:
        """Lowercase language codes and drop blanks, keeping order."""
        codes = [code.strip().lower() for code in v if code.strip()]
        if not codes:
            raise ValueError("At least one source language is required")
        return codes


def get_settings() -> Settings:
    """Get application settings instance.

    Returns:
        Settings instance with values from environment
    """
    return Settings()
