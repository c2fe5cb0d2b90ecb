"""Sector analytics settings loaded from environment variables."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Process-wide settings loaded from environment variables / .env file.

    Report labels and dataset expectations live here so that a new dataset
    version can be described without code changes.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Report metadata ---
    REPORT_UNIT: str = Field(
        default="Million AED",
        description="Monetary unit the snapshot values are denominated in.",
    )
    REPORT_DATA_SOURCE: str = Field(
        default="FCSA,DF_NA_ISIC_CON,3.4.0+all.csv",
        description="Label of the dataset the snapshots were taken from.",
    )
    REPORT_PRICE_TYPE: str = Field(
        default="Constant Prices",
        description="Price basis of the snapshot values.",
    )
    REPORT_BASE_YEAR: int | None = Field(
        default=2018,
        description="Base year for constant-price series.",
    )

    # --- Dataset expectations ---
    EXPECTED_SECTOR_COUNT: int = Field(
        default=17,
        ge=1,
        description="Number of non-aggregate sectors a complete snapshot carries.",
    )
    TOP_SECTOR_COUNT: int = Field(
        default=3,
        ge=1,
        description="How many leading sectors the report summarises.",
    )

    # --- Logging ---
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Application log level.",
    )

    # --- Environment ---
    ENVIRONMENT: Environment = Field(
        default=Environment.DEV,
        description="Deployment environment (dev/staging/prod).",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == Environment.PROD


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
