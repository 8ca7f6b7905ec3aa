"""Runtime settings, read from TICKETS_* environment variables or .env."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TICKETS_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Price table, whole currency units per ticket
    ADULT_PRICE: int = Field(default=20, ge=0)
    CHILD_PRICE: int = Field(default=10, ge=0)
    INFANT_PRICE: int = Field(default=0, ge=0)

    # Max adult + child tickets per purchase
    MAX_TICKETS_PER_PURCHASE: int = Field(default=20, ge=0)

    LOG_LEVEL: str = "INFO"


settings = Settings()
