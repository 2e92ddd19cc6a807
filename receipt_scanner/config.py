"""
Configuration for receipt_scanner package.

Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractorConfig(BaseSettings):
    """Tuning knobs for receipt field extraction."""

    model_config = SettingsConfigDict(
        env_prefix="RECEIPT_SCANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geometry
    nearness_threshold: float = Field(
        default=3.0,
        description="Max vertical distance between a label and its value line",
        gt=0,
    )

    # Labels and tax rates
    total_label: str = Field(
        default="TOTAL",
        description="Label that starts the block holding the receipt total",
        min_length=1,
    )
    gst_rate: int = Field(
        default=5,
        description="Whole-percent GST rate printed on the tax line",
        ge=0,
        le=9,
    )
    pst_rate: int = Field(
        default=7,
        description="Whole-percent PST rate printed on the tax line",
        ge=0,
        le=9,
    )

    # Display
    date_output_format: str = Field(
        default="%m/%d/%Y",
        description="strftime format used when displaying the date",
    )
    total_decimal_places: int = Field(
        default=2,
        description="Decimal places used when displaying amounts",
        ge=0,
        le=6,
    )


@lru_cache
def get_config() -> ExtractorConfig:
    """Get cached configuration instance."""
    return ExtractorConfig()
