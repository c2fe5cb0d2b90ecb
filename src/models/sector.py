"""Sector snapshot and report models.

Inputs are ``SectorSnapshot`` values for two periods; the output is a frozen
``SectorReport`` whose JSON form uses the camelCase keys consumed by the
dashboard layer (``yoyGrowth``, ``topThree``, ...).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field

from src.models.common import AnalyticsBase, Percent, UTCTimestamp

REPORT_VERSION = "1.0"


# ---------------------------------------------------------------------------
# Enums (all StrEnum)
# ---------------------------------------------------------------------------


class SectorCategory(StrEnum):
    """Oil / non-oil split used for the aggregate records."""

    OIL = "oil"
    NON_OIL = "non-oil"


class DominanceLabel(StrEnum):
    """How much of total GDP the top-ranked sector commands."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class SectorSnapshot(AnalyticsBase, frozen=True):
    """Sector values for one period, keyed by sector code.

    Includes the reserved aggregate codes (``_T``, ``_TNO``) alongside the
    individual sectors.
    """

    year: int
    values: dict[str, float]

    def get(self, code: str) -> float | None:
        return self.values.get(code)


# ---------------------------------------------------------------------------
# Report components
# ---------------------------------------------------------------------------


class SectorRecord(AnalyticsBase, frozen=True):
    """Per-sector figures for the current period.

    ``yoy_growth_percent`` is ``None`` when the prior value is zero and the
    growth rate is undefined.
    """

    code: str
    name: str
    category: SectorCategory
    value_current: float = Field(alias="value")
    value_prior: float
    percentage_of_total: Percent = Field(alias="percentage")
    yoy_growth_percent: float | None = Field(default=None, alias="yoyGrowth")
    rank: int = Field(ge=1)


class AggregateRecord(AnalyticsBase, frozen=True):
    """Summed figures for a group of sectors."""

    value: float
    percentage_of_total: Percent = Field(alias="percentage")
    yoy_growth_percent: float | None = Field(default=None, alias="yoyGrowth")


class TopSector(AnalyticsBase, frozen=True):
    code: str
    name: str
    percentage: Percent


class ReportAggregates(AnalyticsBase, frozen=True):
    oil: AggregateRecord
    non_oil: AggregateRecord = Field(alias="nonOil")
    top_three: list[TopSector] = Field(default_factory=list, alias="topThree")


class FastestGrowingSector(AnalyticsBase, frozen=True):
    code: str
    name: str
    growth: float


class Insights(AnalyticsBase, frozen=True):
    """Concentration and growth highlights derived from the ranked sectors."""

    diversification_index: float = Field(
        ge=0.0, le=1.0, alias="diversificationIndex",
    )
    dominance_label: DominanceLabel = Field(alias="dominanceLabel")
    fastest_growing_sector: FastestGrowingSector | None = Field(
        default=None, alias="fastestGrowingSector",
    )
    sector_count: int = Field(ge=0, alias="sectorCount")


class ReportMetadata(AnalyticsBase, frozen=True):
    year: int
    comparison_year: int = Field(alias="comparisonYear")
    unit: str
    data_source: str = Field(alias="dataSource")
    price_type: str | None = Field(default=None, alias="priceType")
    base_year: int | None = Field(default=None, alias="baseYear")
    total_value: float = Field(alias="totalValue")
    total_non_oil_value: float | None = Field(
        default=None, alias="totalNonOilValue",
    )
    generated_at: UTCTimestamp = Field(alias="generatedAt")
    version: str = REPORT_VERSION


class SectorReport(AnalyticsBase, frozen=True):
    """Immutable sectoral breakdown for one period against its comparison period.

    ``sectors`` is ordered by rank ascending.
    """

    metadata: ReportMetadata
    sectors: list[SectorRecord]
    aggregates: ReportAggregates
    insights: Insights

    def sector(self, code: str) -> SectorRecord:
        """Return the record for *code*.

        Raises:
            KeyError: If the report has no sector with that code.
        """
        for record in self.sectors:
            if record.code == code:
                return record
        raise KeyError(code)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict using the wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)
