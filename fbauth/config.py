"""Client configuration management using pydantic-settings."""

from dataclasses import dataclass
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

IDENTITY_TOOLKIT_BASE_URL = "https://identitytoolkit.googleapis.com/v1"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Firebase project Web API key (Project settings > General)
    firebase_web_api_key: str = ""
    identity_toolkit_base_url: str = IDENTITY_TOOLKIT_BASE_URL

    # Seconds; applied to connect, read, write and pool
    http_timeout: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class FirebaseAuthOptions:
    """Read-only configuration for a single FirebaseAuthService."""

    api_key: str
    base_url: str = IDENTITY_TOOLKIT_BASE_URL
    timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FirebaseAuthOptions":
        """Build options from application settings."""
        settings = settings or get_settings()
        return cls(
            api_key=settings.firebase_web_api_key,
            base_url=settings.identity_toolkit_base_url,
            timeout=settings.http_timeout,
        )
