import json
import logging
from pathlib import Path
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SCHEDULE_URL = "https://cdn.espn.com/core/wnba/schedule?xhr=1&limit=100"


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Schedule Feed
    schedule_url: str = Field(
        DEFAULT_SCHEDULE_URL, description="URL of the JSON schedule feed."
    )
    refresh_interval: float = Field(
        3600,
        gt=0,
        description="Seconds between scheduled refreshes of the menu.",
    )
    request_timeout: float = Field(
        30.0, gt=0, description="HTTP timeout for a single feed request."
    )
    fetch_attempts: int = Field(
        1,
        ge=1,
        le=5,
        description="Transport attempts per fetch. 1 means a failed fetch waits for the next tick.",
    )

    # Host Collaborators
    settings_path: Path = Field(
        Path.home() / ".wnba_schedule" / "settings.json",
        description="JSON file backing the persistent settings store.",
    )
    icon_path: Optional[Path] = Field(
        None, description="Optional image used as the menu icon."
    )
    favorite_teams: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        description="Favorite teams used when the settings store holds none.",
    )

    @field_validator("favorite_teams", mode="before")
    @classmethod
    def split_favorite_teams(cls, value: Any) -> Any:
        """Accepts a JSON list or a comma-separated string, e.g. "Aces,Liberty"."""
        if not isinstance(value, str):
            return value
        if value.strip().startswith("["):
            return json.loads(value)
        return [team.strip() for team in value.split(",") if team.strip()]

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_prefix="WNBA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
