# credvault/core/config.py

import logging
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment
    ENV: str = "development"

    # Credential store
    DATABASE_URL: str = "sqlite:///./data/app.db"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Password hashing
    BCRYPT_ROUNDS: int = 10

    # Strong password policy
    PASSWORD_MIN_LENGTH: int = 8
    PASSWORD_MIN_LOWERCASE: int = 1
    PASSWORD_MIN_UPPERCASE: int = 1
    PASSWORD_MIN_NUMBERS: int = 1
    PASSWORD_MIN_SYMBOLS: int = 1

    # Rate limiting (per client IP, fixed window)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_MAX_REQUESTS: int = 100
    RATE_LIMIT_WINDOW_SECONDS: int = 15 * 60

    # CORS
    CORS_ORIGINS: str = "*"  # comma-separated

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]


def get_settings() -> Settings:
    return Settings()


def validate_config(settings: Settings, logger: Optional[logging.Logger] = None) -> None:
    """Reject settings the server cannot run with.

    bcrypt only accepts work factors between 4 and 31, and a policy minimum
    below 1 would let empty passwords through.
    """
    log = logger or logging.getLogger("credvault")

    if not 4 <= settings.BCRYPT_ROUNDS <= 31:
        raise RuntimeError(f"BCRYPT_ROUNDS must be between 4 and 31, got {settings.BCRYPT_ROUNDS}")
    if settings.PASSWORD_MIN_LENGTH < 1:
        raise RuntimeError("PASSWORD_MIN_LENGTH must be at least 1")
    if settings.RATE_LIMIT_MAX_REQUESTS < 1 or settings.RATE_LIMIT_WINDOW_SECONDS < 1:
        raise RuntimeError("RATE_LIMIT_MAX_REQUESTS and RATE_LIMIT_WINDOW_SECONDS must be positive")

    if settings.BCRYPT_ROUNDS < 10:
        log.warning("BCRYPT_ROUNDS=%s is below the recommended work factor of 10", settings.BCRYPT_ROUNDS)
