"""
Configuration Management

Uses Pydantic Settings for environment-based configuration.
Loads from .env file automatically.
"""

from typing import Optional
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Claude API (Optional - enrichment is skipped without it)
    ANTHROPIC_API_KEY: Optional[str] = None
    CLAUDE_MODEL: str = "claude-sonnet-4-20250514"
    CLAUDE_FAST_MODEL: str = "claude-3-5-haiku-20241022"

    # Hunter (Optional - deliverability checks fall back to a mock)
    HUNTER_API_KEY: Optional[str] = None

    # Application Settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Timeouts (seconds)
    FETCH_TIMEOUT: float = 15.0
    ENRICHMENT_TIMEOUT: float = 30.0
    VERIFICATION_TIMEOUT: float = 10.0

    # Retries
    ENRICHMENT_MAX_RETRIES: int = 2

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env file
        case_sensitive = False  # Allow both UPPERCASE and lowercase

    @property
    def enrichment_enabled(self) -> bool:
        """Enrichment runs only when a Claude credential is configured."""
        return bool(self.ANTHROPIC_API_KEY)


@lru_cache
def get_settings() -> Settings:
    """Get or create cached settings instance."""
    return Settings()
