"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _normalize_base_url(value: Any) -> str:
    if not isinstance(value, str) or not value.startswith(("http://", "https://")):
        raise ValueError(f"Expected absolute http(s) URL, got: {value!r}")
    return value.rstrip("/")


class TmdbConfig(BaseModel):
    """TMDB metadata API settings (YAML section: tmdb.*)."""

    api_key: str | None = Field(
        default=None,
        description="TMDB API key. Without it every title lookup fails soft.",
    )
    base_url: str = Field(
        default="https://api.themoviedb.org/3",
        description="TMDB API root.",
    )
    language: str | None = Field(
        default=None,
        description="Optional TMDB locale, e.g. 'en-US'.",
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def _validate_base_url(cls, v: Any) -> str:
        return _normalize_base_url(v)


class CinebyConfig(BaseModel):
    """Content site settings (YAML section: cineby.*)."""

    base_url: str = Field(
        default="https://www.cineby.app",
        description="Site origin used for search and to qualify relative links.",
    )
    user_agent: str = Field(
        default="Mozilla/5.0",
        description="User-Agent sent with content page requests.",
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def _validate_base_url(cls, v: Any) -> str:
        return _normalize_base_url(v)


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/logging/tmdb/cineby).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="cinebyarr", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # HTTP client (YAML section: http.*)
    http_timeout_seconds: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="HTTP timeout in seconds. Unset = no client-side timeout.",
    )
    http_follow_redirects: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
        description="Whether HTTP client follows redirects.",
    )
    http_user_agent: str = Field(
        default="Cinebyarr/3.0.0",
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="Default User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    tmdb: TmdbConfig = Field(default_factory=TmdbConfig)
    cineby: CinebyConfig = Field(default_factory=CinebyConfig)

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.

        The TMDB API key is masked.
        """
        tmdb = self.tmdb.model_dump()
        if tmdb["api_key"]:
            tmdb["api_key"] = "***"
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "follow_redirects": self.http_follow_redirects,
                "user_agent": self.http_user_agent,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
            "tmdb": tmdb,
            "cineby": self.cineby.model_dump(),
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Intended usage:
    - load.py creates EnvOverrides() to read CINEBYARR_* variables,
      converts to dict of set values, merges into YAML/defaults,
      then validates AppConfig.

    Supported env var examples (flat, explicit):
    - CINEBYARR_ENVIRONMENT
    - CINEBYARR_HTTP_TIMEOUT_SECONDS
    - CINEBYARR_LOG_LEVEL
    - CINEBYARR_TMDB_API_KEY
    - CINEBYARR_CINEBY_BASE_URL
    """

    model_config = SettingsConfigDict(
        env_prefix="CINEBYARR_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_timeout_seconds: Optional[float] = None
    http_follow_redirects: Optional[bool] = None
    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    tmdb_api_key: Optional[str] = None
    tmdb_language: Optional[str] = None

    cineby_base_url: Optional[str] = None
    cineby_user_agent: Optional[str] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
