"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Full URL override (used by tests and local SQLite runs)
    database_url: Optional[str] = None

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "career_user"
    postgres_password: str = "password"
    postgres_db: str = "career_portal"

    # Cookie sessions
    session_secret_key: str = "change-this-secret"
    session_cookie_name: str = "career_session"
    session_max_age_seconds: int = 60 * 60 * 24 * 7

    # Password hashing cost
    bcrypt_rounds: int = 12

    # CORS (the React client runs on its own dev server)
    cors_origins: List[str] = ["http://localhost:5173"]

    # Bootstrap admin, created on startup when both are set
    admin_email: str = ""
    admin_password: str = ""
    admin_name: str = "Administrator"

    # App
    debug: bool = False

    @property
    def sqlalchemy_url(self) -> str:
        """Connection URL for SQLAlchemy, preferring DATABASE_URL if set."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
