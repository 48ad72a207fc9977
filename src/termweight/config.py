"""Configuration management using Pydantic Settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from termweight.logging import LogLevel
from termweight.scoring.vocabulary import UNCATEGORIZED


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TERMWEIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    unknown_term: str = UNCATEGORIZED
    default_top_terms: int = 10
    log_level: LogLevel = "WARNING"

    @field_validator("unknown_term")
    @classmethod
    def validate_unknown_term(cls, v: str) -> str:
        """Validate the sentinel term is not empty."""
        if not v:
            raise ValueError("unknown_term must not be empty")
        return v

    @field_validator("default_top_terms")
    @classmethod
    def validate_default_top_terms(cls, v: int) -> int:
        """Validate default_top_terms is at least 1."""
        if v < 1:
            raise ValueError("default_top_terms must be at least 1")
        return v


settings = Settings()
