"""Configuration settings for the MSST platform."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./msst_platform.db")

    # Account lifecycle
    RESET_KEY_VALIDITY_HOURS: int = int(os.getenv("RESET_KEY_VALIDITY_HOURS", "24"))
    NOT_ACTIVATED_RETENTION_DAYS: int = int(os.getenv("NOT_ACTIVATED_RETENTION_DAYS", "3"))
    PASSWORD_MIN_LENGTH: int = int(os.getenv("PASSWORD_MIN_LENGTH", "4"))
    PASSWORD_MAX_LENGTH: int = int(os.getenv("PASSWORD_MAX_LENGTH", "100"))

    # Scheduled cleanup of never-activated accounts
    CLEANUP_ENABLED: bool = os.getenv("CLEANUP_ENABLED", "true").lower() == "true"
    CLEANUP_HOUR: int = int(os.getenv("CLEANUP_HOUR", "1"))

    # Application
    APP_ENV: str = os.getenv("APP_ENV", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    def validate(self) -> list[str]:
        """Validate settings and return list of warnings."""
        errors = []
        if not 0 <= self.CLEANUP_HOUR <= 23:
            errors.append(f"CLEANUP_HOUR must be between 0 and 23, got {self.CLEANUP_HOUR}")
        if self.RESET_KEY_VALIDITY_HOURS <= 0:
            errors.append("RESET_KEY_VALIDITY_HOURS must be positive - reset keys would never be accepted")
        if self.PASSWORD_MIN_LENGTH > self.PASSWORD_MAX_LENGTH:
            errors.append("PASSWORD_MIN_LENGTH is greater than PASSWORD_MAX_LENGTH")
        return errors


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
