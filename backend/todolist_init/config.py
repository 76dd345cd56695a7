"""
Bootstrap configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from todolist_init.models.credentials import AppCredentials


class Settings(BaseSettings):
    """Bootstrap settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB (administrative connection)
    mongo_uri: str = "mongodb://mongodb:27017"
    server_selection_timeout_ms: int = 5000

    # Application user, no defaults
    app_user: str = Field(..., description="Username of the application user")
    app_password: str = Field(..., description="Password of the application user")

    # Re-run behaviour
    bootstrap_skip_existing: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v

    def credentials(self) -> AppCredentials:
        """Application credentials to hand to the bootstrap operation."""
        return AppCredentials(username=self.app_user, password=self.app_password)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
