# /portal/core/config.py

"""
Application settings for the timetable portal.

Every value can be overridden through an environment variable of the same
name (or a `.env` file in the working directory). A single module-level
`settings` instance is shared by the whole application.
"""

import json
from typing import Any, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors_origins(v: Any) -> List[str]:
    """Parse CORS origins from a JSON list or a comma-separated string."""
    if isinstance(v, list):
        return v
    if isinstance(v, str):
        if v.startswith('['):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                pass
        return [origin.strip() for origin in v.split(',') if origin.strip()]
    return []


class Settings(BaseSettings):
    """Application settings - all configurable via environment variables"""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Application ---
    APP_NAME: str = "Campus Timetable Portal"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # --- Database ---
    DATABASE_URL: str = "sqlite:///./portal.db"

    # --- Security ---
    SECRET_KEY: str = "dev-secret-key"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 8
    BCRYPT_ROUNDS: int = 12

    # --- HTTP ---
    CORS_ORIGINS: Any = ["*"]

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    # --- Dashboard client ---
    API_BASE_URL: str = "http://localhost:8000"
    CLIENT_TIMEOUT_SECONDS: float = 10.0
    DASHBOARD_JOIN_POLICY: str = "all_or_nothing"
    LOGIN_PATH: str = "/login"

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_cors_origins(cls, v: Any) -> List[str]:
        return parse_cors_origins(v)

    @field_validator("LOG_FORMAT", "DASHBOARD_JOIN_POLICY")
    @classmethod
    def _lowercase(cls, v: str) -> str:
        return v.strip().lower()


settings = Settings()
