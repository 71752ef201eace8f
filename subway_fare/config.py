"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the fare constants, the
network data location and the logging setup.

Configuration can be overridden via environment variables:
- SUBWAY_FARE_BASE_FARE=1350
- SUBWAY_FARE_CHILD_DISCOUNT_PERCENT=50
- SUBWAY_DATA_DATA_DIR=/path/to/data
- SUBWAY_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class FareConfig(BaseSettings):
    """Fare policy constants.

    Amounts are in the smallest currency unit. Environment variables
    prefixed with SUBWAY_FARE_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_FARE_")

    # Distance bands
    base_fare: int = Field(default=1250, ge=0)
    first_band_limit: int = Field(default=10, gt=0)
    second_band_limit: int = Field(default=50, gt=0)
    first_band_unit: int = Field(default=5, gt=0)
    second_band_unit: int = Field(default=8, gt=0)
    first_band_fee: int = Field(default=100, ge=0)
    second_band_fee: int = Field(default=100, ge=0)

    # Age brackets
    child_min_age: int = Field(default=6, ge=0)
    child_max_age: int = Field(default=12, ge=0)
    youth_min_age: int = Field(default=13, ge=0)
    youth_max_age: int = Field(default=18, ge=0)
    child_deduction: int = Field(default=350, ge=0)
    youth_deduction: int = Field(default=350, ge=0)
    child_discount_percent: int = Field(default=50, ge=0, le=100)
    youth_discount_percent: int = Field(default=20, ge=0, le=100)

    @model_validator(mode="after")
    def _check_ranges(self) -> FareConfig:
        if self.second_band_limit <= self.first_band_limit:
            raise ValueError("second_band_limit must exceed first_band_limit")
        if self.child_min_age > self.child_max_age:
            raise ValueError("child_min_age must not exceed child_max_age")
        if self.youth_min_age > self.youth_max_age:
            raise ValueError("youth_min_age must not exceed youth_max_age")
        if self.child_max_age >= self.youth_min_age:
            raise ValueError("child and youth age ranges must not overlap")
        return self


class DataConfig(BaseSettings):
    """Network snapshot files.

    Environment variables prefixed with SUBWAY_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    stations_file: str = "stations.csv"
    lines_file: str = "lines.csv"
    sections_file: str = "sections.csv"

    @property
    def stations_path(self) -> Path:
        """Full path to stations CSV file."""
        return self.data_dir / self.stations_file

    @property
    def lines_path(self) -> Path:
        """Full path to lines CSV file."""
        return self.data_dir / self.lines_file

    @property
    def sections_path(self) -> Path:
        """Full path to sections CSV file."""
        return self.data_dir / self.sections_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SUBWAY_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.fare.base_fare)
        print(config.data.sections_path)

    Environment variables prefixed with SUBWAY_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBWAY_")

    fare: FareConfig = Field(default_factory=FareConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Raises:
        ConfigurationError: If a setting from the environment is invalid.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        errors = e.errors()
        setting = ".".join(str(part) for part in errors[0]["loc"]) if errors else ""
        raise ConfigurationError(
            "Invalid configuration", setting_name=setting, cause=e
        ) from e


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
