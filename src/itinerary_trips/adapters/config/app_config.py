"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_FILE = "config.toml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input configuration
    input_file: str = Field(default="./input.txt", description="Path to the itinerary file")
    base_override: str | None = Field(
        default=None,
        description="Base location to use instead of the one declared in the itinerary",
    )

    # Output configuration
    trip_label: str = Field(default="TRIP to", description="Prefix of each trip header line")
    stop_separator: str = Field(default=", ", description="Separator between stops in headers")

    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL",
    )

    # TOML config file path
    # A missing default file is ignored, a missing explicit file is an error
    config_file: str | None = Field(
        default=DEFAULT_CONFIG_FILE,
        description="Path to TOML configuration file for input and output settings",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard logging level names."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("trip_label")
    @classmethod
    def validate_trip_label(cls, v: str) -> str:
        """Validate the trip label is not blank."""
        if not v.strip():
            raise ValueError("trip_label must not be empty")
        return v

    def load_config_file(self) -> "AppConfig":
        """Apply settings from the TOML config file, if one is available.

        Recognized tables:
            [itinerary]: input_file, base
            [output]: trip_label, stop_separator

        Returns:
            This config, updated in place.

        Raises:
            FileNotFoundError: If an explicitly configured file does not exist.
            ValueError: If a recognized table is not a TOML table.
        """
        if not self.config_file:
            return self

        config_path = Path(self.config_file)
        if not config_path.exists():
            if self.config_file != DEFAULT_CONFIG_FILE:
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return self

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
        logger.debug(f"Loaded configuration from {config_path}")

        itinerary = toml_data.get("itinerary", {})
        if not isinstance(itinerary, dict):
            raise ValueError("TOML config 'itinerary' must be a table")
        if "input_file" in itinerary:
            self.input_file = str(itinerary["input_file"])
        if "base" in itinerary:
            self.base_override = str(itinerary["base"])

        output = toml_data.get("output", {})
        if not isinstance(output, dict):
            raise ValueError("TOML config 'output' must be a table")
        if "trip_label" in output:
            trip_label = str(output["trip_label"])
            if not trip_label.strip():
                raise ValueError("trip_label must not be empty")
            self.trip_label = trip_label
        if "stop_separator" in output:
            self.stop_separator = str(output["stop_separator"])

        return self
