"""
Configuration settings for retry-backoff.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development. These values only seed the
process-wide retry defaults; callers can still override them at runtime
with override_default_options().
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "retry-backoff"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    
    # === Retry Defaults ===
    RETRY_MAX_ATTEMPTS: int = 10
    RETRY_INIT_DELAY_MS: float = 1000.0  # First retry waits this long
    RETRY_BACKOFF_EXPONENT: float = 2.0  # Default exponential multiplier
    RETRY_BACKOFF_MAX_DELAY_MS: Optional[float] = None  # None = no cap


# Global settings instance
settings = Settings()
