"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from code_analyzer.schemas.analysis import Category

# Value shipped in example env files; treated the same as a missing key.
PLACEHOLDER_API_KEY = "your_gemini_api_key_here"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_env: str = "development"
    app_debug: bool = False
    log_level: str = "INFO"

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"

    # Analysis
    analysis_timeout_seconds: float = 30.0
    analysis_max_tokens: int = 2000
    analysis_temperature: float = 0.3
    default_categories: List[Category] = list(Category)

    # CORS
    cors_origins: List[str] = ["http://localhost:3000"]

    @field_validator("analysis_timeout_seconds", mode="after")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Remote calls must always be bounded."""
        if v <= 0:
            raise ValueError("analysis_timeout_seconds must be greater than 0")
        return v

    @field_validator("analysis_temperature", mode="after")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError("analysis_temperature must be between 0 and 2")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def remote_enabled(self) -> bool:
        """Whether a usable provider credential is configured."""
        key = self.gemini_api_key.strip()
        return bool(key) and key != PLACEHOLDER_API_KEY

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
