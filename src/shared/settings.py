"""Application settings shared by the SneakerHub bounded contexts.

Values are read from the environment (or a local ``.env`` file). Domain
persistence settings live in each context's ``domain.toml``;
this module only covers what the HTTP and identity layers need.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "SneakerHub API"
    API_PREFIX: str = "/api"

    # Bearer tokens
    JWT_SECRET: str = Field(DEFAULT_JWT_SECRET, description="HMAC secret used to sign bearer tokens")
    JWT_ALGORITHM: str = "HS256"
    TOKEN_TTL_DAYS: int = Field(7, ge=1, description="Bearer token validity window in days")

    # Passwords
    PASSWORD_MIN_LENGTH: int = Field(6, ge=1)
    BCRYPT_ROUNDS: int = Field(10, ge=4, le=31)

    # Ordering policy
    DELIVERY_WINDOW_DAYS: int = Field(7, ge=0, description="Days between placing an order and its estimated delivery")

    # Storefront
    REFRESH_INTERVAL_SECONDS: float = Field(30.0, gt=0)

    CORS_ORIGINS: list[str] = Field(default=["*"])

    # Logging
    LOG_LEVEL: str | None = Field(None, description="Overrides the per-environment log level")
    LOG_DIR: str | None = Field(None, description="Also write a rotating log file into this directory")

    @property
    def uses_default_secret(self) -> bool:
        return self.JWT_SECRET == DEFAULT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
