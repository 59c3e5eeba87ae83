import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Static data sources (file path or http(s) URL)
    teams_source: str = Field(
        "data/teams.json", description="Location of the team metadata JSON."
    )
    standings_source: str = Field(
        "data/standings.json", description="Location of the standings JSON."
    )

    # Remote fetch behaviour, only used for http(s) sources
    fetch_timeout_seconds: float = Field(
        30.0, gt=0, description="Timeout for fetching a remote data source."
    )
    fetch_max_attempts: int = Field(
        4, ge=1, le=10, description="Total attempts for a remote data source."
    )

    # HTTP server
    host: str = Field("127.0.0.1", description="Interface the server binds to.")
    port: int = Field(3000, ge=1, le=65535, description="Port the server binds to.")

    # Rendering
    stylesheet_url: str = Field(
        "https://cdn.jsdelivr.net/npm/water.css@2/out/water.min.css",
        description="Stylesheet linked from every page.",
    )
    not_found_status_code: int = Field(
        404,
        ge=200,
        le=599,
        description="Status for unmatched paths (set to 200 for legacy behaviour).",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
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
        if log_level_upper not in VALID_LOG_LEVELS:
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
