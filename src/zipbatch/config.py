"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "staging", "production"]

DEFAULT_API_BASE_URLS: dict[str, str] = {
    "production": "https://api.platform.brobot.com.br",
    "staging": "https://api.platform-staging.brobot.com.br",
    "development": "http://localhost:3000",
}


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="ZIPBATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Archives API
    environment: Environment = Field(
        default="development",
        description="Environment name",
    )
    api_base_urls: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_API_BASE_URLS),
        description="Base URL per environment",
    )
    api_timeout: float = Field(default=60.0, gt=0, description="HTTP timeout in seconds")
    request_interval: float = Field(
        default=0.5,
        ge=0,
        description="Delay in seconds after each upload",
    )

    # Splitter batch limits
    split_max_files: int = Field(default=500, gt=0, description="Max XML files per uploaded ZIP")
    split_max_size_mb: float = Field(default=1.0, gt=0, description="Approx size per uploaded ZIP (MB)")

    # Application
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("api_base_urls")
    @classmethod
    def _merge_base_urls(cls, value: dict[str, str]) -> dict[str, str]:
        """Overrides are merged into the default table; only the known environments are allowed."""
        unknown = set(value) - set(DEFAULT_API_BASE_URLS)
        if unknown:
            raise ValueError(f"Unknown environments: {', '.join(sorted(unknown))}")
        return {**DEFAULT_API_BASE_URLS, **value}

    def base_url_for(self, environment: str) -> str:
        """Base URL for a named environment."""
        try:
            return self.api_base_urls[environment]
        except KeyError:
            raise ValueError(f"Unknown environment: {environment}") from None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
