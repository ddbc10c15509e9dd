import logging
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_SESSION_SECRET = "default_secret_for_development"


class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "M&E Tool"
    VERSION: str = "1.0.0"
    NODE_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Session cookie
    SESSION_SECRET: Optional[str] = None
    SESSION_COOKIE_NAME: str = "ME_session"
    SESSION_MAX_AGE_DAYS: int = 30
    SESSION_ALGORITHM: str = "HS256"
    DOMAIN: Optional[str] = None

    # Database
    DATABASE_URL: str = "sqlite:///./me_tool.db"

    # Initial administrator, created on startup when both values are present
    INITIAL_ADMIN_EMAIL: Optional[str] = None
    INITIAL_ADMIN_PASSWORD: Optional[str] = None
    INITIAL_ADMIN_NAME: str = "Admin User"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        extra="ignore",
    )

    @field_validator("NODE_ENV", mode="before")
    @classmethod
    def normalize_environment(cls, v: Optional[str]) -> str:
        return (v or "development").strip().lower()

    @field_validator("SESSION_SECRET", "DOMAIN", mode="before")
    @classmethod
    def blank_as_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"

    def resolve_session_secret(self) -> str:
        """Secret used to sign the session cookie.

        Production refuses to start without SESSION_SECRET; any other
        environment falls back to a fixed development secret and says so.
        """
        if self.SESSION_SECRET:
            return self.SESSION_SECRET
        if self.is_production:
            raise RuntimeError("SESSION_SECRET must be set in production")
        logger.warning(
            "No SESSION_SECRET set. This is okay in development, but must be set in production."
        )
        return DEFAULT_SESSION_SECRET


@lru_cache
def get_settings() -> Settings:
    return Settings()
