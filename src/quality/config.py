"""Validation configuration.

Tolerances and bounds for the report validator. Defaults match the national
accounts sectoral breakdown (17 ISIC sections); the expected sector count is
configuration so that a new dataset version can change it.
"""

from __future__ import annotations

from pydantic import Field

from src.config.settings import Settings
from src.models.common import AnalyticsBase


class ValidationConfig(AnalyticsBase):
    """Thresholds used by :class:`src.quality.validator.ReportValidator`."""

    # Relative tolerance (fraction of total) for sum of sectors vs total GDP.
    total_sum_tolerance: float = Field(default=0.001, ge=0.0)

    # Absolute tolerance (percentage points) for the sum of sector shares.
    percentage_sum_tolerance: float = Field(default=0.1, ge=0.0)

    expected_sector_count: int = Field(default=17, ge=1)

    growth_min_pct: float = -50.0
    growth_max_pct: float = 50.0

    # Relative tolerance for the non-oil aggregate vs reported non-oil total.
    non_oil_tolerance: float = Field(default=0.001, ge=0.0)

    @classmethod
    def from_settings(cls, settings: Settings) -> ValidationConfig:
        """Build a config using the dataset expectations in *settings*."""
        return cls(expected_sector_count=settings.EXPECTED_SECTOR_COUNT)
