"""Keyboard suggestion configuration using Pydantic Settings with YAML support.

Configuration is layered from:
- YAML files under ``config/`` (base, then per-environment overrides)
- A ``.env`` file for secrets
- Environment variables (nested with ``__``)
- Keyword arguments passed to ``Settings()``
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


DEFAULT_API_BASE_URL = "https://api.florisboard.ai/v1"


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "replykit"
    version: str = "0.1.0"
    debug: bool = False


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


class SuggestionServiceSettings(BaseModel):
    """Remote suggestion service and generation behavior.

    ``use_fallback`` mirrors the keyboard preference that keeps every request
    on the local canned generator instead of the network.
    """

    use_fallback: bool = True
    base_url: str | None = None
    timeout: float = Field(default=10.0, gt=0)
    count: int = Field(default=3, ge=1)

    @field_validator("base_url", mode="before")
    @classmethod
    def _blank_to_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SuggestionCacheSettings(BaseModel):
    """In-memory suggestion cache limits."""

    capacity: int = Field(default=50, ge=1)
    ttl_seconds: float = Field(default=300.0, gt=0)


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Suggestion settings with YAML + environment variable support.

    Priority (highest to lowest):
    1. Values passed to Settings()
    2. Environment variables
    3. .env file (secrets only)
    4. Environment-specific YAML files (config/environments/{APP_ENV}/)
    5. Base YAML files (config/base/)
    6. Default values in code

    Environment variables override nested settings with the '__' delimiter,
    e.g. SUGGESTIONS__USE_FALLBACK=false.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    logging: LoggingSettings = LoggingSettings()
    suggestions: SuggestionServiceSettings = SuggestionServiceSettings()
    cache: SuggestionCacheSettings = SuggestionCacheSettings()

    # Secrets (from .env / environment only - never in YAML)
    SUGGESTION_API_KEY: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source below env and .env, above secrets files."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def suggestion_api_key(self) -> str | None:
        """API key for the remote service, ``None`` when unset or blank."""
        return self.SUGGESTION_API_KEY.strip() or None

    @property
    def suggestion_api_base_url(self) -> str:
        """Base URL for the remote service."""
        return (self.suggestions.base_url or DEFAULT_API_BASE_URL).rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once per process; call ``get_settings.cache_clear()``
    after changing the environment to force a reload.
    """
    return Settings()
