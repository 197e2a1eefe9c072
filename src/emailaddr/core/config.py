"""
Configuration management using Pydantic Settings.

Host-level defaults for the email address type, loaded from environment
variables prefixed with ``EMAILADDR_`` (or an optional ``.env`` file).

Architecture:
- Flat Settings structure (no nesting)
- Type validation via Pydantic
- Read only by the container and the host binding; core functions take
  explicit arguments and never consult settings

Usage:
    from emailaddr.core.config import get_settings

    settings = get_settings()
    if settings.grammar is GrammarLevel.STRICT:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from emailaddr.core.constants import MAX_FIELD_LENGTH
from emailaddr.core.enums import Environment, GrammarLevel

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Email address type settings (flat structure).

    Configuration precedence:
        1. Environment variables (EMAILADDR_*)
        2. .env file entries
        3. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    grammar: GrammarLevel = Field(
        default=GrammarLevel.MINIMAL,
        description="Format rules applied after scanning (minimal or strict)",
    )
    max_field_length: int = Field(
        default=MAX_FIELD_LENGTH,
        ge=1,
        le=MAX_FIELD_LENGTH,
        description="Longest accepted local or domain part, in characters",
    )

    model_config = SettingsConfigDict(
        env_prefix="EMAILADDR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name.

        Args:
            v: Level name in any case.

        Returns:
            Upper-case level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        normalized = v.upper().strip()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return normalized

    @property
    def is_strict(self) -> bool:
        """Check whether the strict grammar extension is enabled."""
        return self.grammar is GrammarLevel.STRICT


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance.

    Returns:
        Settings: Configuration loaded from the environment.
    """
    return Settings()
