"""Engine configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    # Grams assumed per piece/slice/serving when no food override applies.
    default_grams_per_piece: float | None = Field(default=None, gt=0.0)
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="NUTRITION_ENGINE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
