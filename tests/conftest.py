"""Shared pytest fixtures for the sector analytics test suite.

Provides:
- values_2024 / values_2023: 17-sector national accounts snapshot values
  whose reserved totals match the sector sums
- current_snapshot / prior_snapshot: the same values as SectorSnapshots
- settings: Settings with defaults, isolated from any local .env
- fixed_time: a pinned generation timestamp
"""

from datetime import datetime, timezone

import pytest

from src.config.settings import Settings
from src.models.sector import SectorSnapshot

SECTORS_2024: dict[str, float] = {
    "A": 19234.56,
    "B": 405678.90,
    "C": 225026.94,
    "DE": 35890.45,
    "F": 192876.34,
    "G": 232456.78,
    "H": 102345.89,
    "I": 47890.12,
    "J": 81234.56,
    "K": 118765.43,
    "L": 166543.21,
    "MN": 72345.67,
    "O": 92456.78,
    "P": 56789.34,
    "Q": 45678.90,
    "RS": 24567.89,
    "T": 13456.78,
}

SECTORS_2023: dict[str, float] = {
    "A": 18450.32,
    "B": 398245.67,
    "C": 217853.04,
    "DE": 34562.18,
    "F": 186234.55,
    "G": 225026.94,
    "H": 98234.76,
    "I": 45678.23,
    "J": 76543.89,
    "K": 112345.67,
    "L": 156789.34,
    "MN": 67890.12,
    "O": 89012.45,
    "P": 54321.78,
    "Q": 43210.56,
    "RS": 23456.78,
    "T": 12345.67,
}

TOTAL_2024 = 1933238.54
NON_OIL_2024 = 1527559.64
TOTAL_2023 = 1860201.95
NON_OIL_2023 = 1461956.28


@pytest.fixture
def values_2024() -> dict[str, float]:
    return {**SECTORS_2024, "_T": TOTAL_2024, "_TNO": NON_OIL_2024}


@pytest.fixture
def values_2023() -> dict[str, float]:
    return {**SECTORS_2023, "_T": TOTAL_2023, "_TNO": NON_OIL_2023}


@pytest.fixture
def current_snapshot(values_2024: dict[str, float]) -> SectorSnapshot:
    return SectorSnapshot(year=2024, values=values_2024)


@pytest.fixture
def prior_snapshot(values_2023: dict[str, float]) -> SectorSnapshot:
    return SectorSnapshot(year=2023, values=values_2023)


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any .env in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)
