"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
import re
from datetime import timedelta
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$", re.IGNORECASE)

_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def parse_duration(value: str) -> timedelta:
    """
    Parse a token lifetime such as "7d", "12h", "30m" or "3600".

    A bare number is read as seconds.

    Args:
        value: Duration string

    Returns:
        timedelta: Parsed duration

    Raises:
        ValueError: If the string is not a positive duration
    """
    match = _DURATION_PATTERN.match(str(value))
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = int(match.group(1)), match.group(2).lower()
    if amount <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return timedelta(**{_DURATION_UNITS[unit]: amount})


class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        database_url: SQLAlchemy connection string
        secret_key: Process-wide secret used to sign access tokens
        algorithm: Algorithm used for JWT encoding (HS256)
        access_token_expire: Access token lifetime, e.g. "7d" or "12h"
        cors_origins: Origins allowed by the CORS middleware
        log_level: Root logging level
    """
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Database settings
    database_url: str = "sqlite:///./clinic.db"

    # JWT settings
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire: str = "7d"

    # HTTP settings
    cors_origins: List[str] = ["http://localhost:5173"]

    log_level: str = "INFO"

    @field_validator("secret_key")
    @classmethod
    def secret_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("secret_key must not be empty")
        return value

    @field_validator("access_token_expire")
    @classmethod
    def access_token_expire_is_duration(cls, value: str) -> str:
        parse_duration(value)
        return value

    @property
    def access_token_lifetime(self) -> timedelta:
        """Parsed access token lifetime"""
        return parse_duration(self.access_token_expire)


# Create settings instance
settings = Settings()
