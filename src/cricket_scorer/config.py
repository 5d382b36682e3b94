"""Configuration management for the cricket scoring system."""

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load environment from .env if present
load_dotenv(override=False)


class MatchSettings(BaseSettings):
    """Defaults applied to newly created matches."""

    model_config = SettingsConfigDict(populate_by_name=True)

    balls_per_over: int = Field(default=6, ge=1, validation_alias="BALLS_PER_OVER")
    innings_per_side: int = Field(default=2, ge=1, le=2, validation_alias="INNINGS_PER_SIDE")
    players_per_side: int = Field(default=11, ge=2, validation_alias="PLAYERS_PER_SIDE")

    # Whether illegal deliveries count as balls faced
    no_balls_as_balls_faced: bool = Field(default=True, validation_alias="NO_BALLS_AS_BALLS_FACED")
    wides_as_balls_faced: bool = Field(default=False, validation_alias="WIDES_AS_BALLS_FACED")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(populate_by_name=True)

    level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    file: Optional[str] = Field(default=None, validation_alias="LOG_FILE")


class Settings(BaseSettings):
    """Main application settings."""

    match: MatchSettings = Field(default_factory=MatchSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings loaded from environment."""
    return Settings()
