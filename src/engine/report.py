"""Sectoral report assembly.

Pure deterministic pipeline: two snapshots in, one SectorReport out.
Given the same inputs, produces the same report apart from
``metadata.generated_at``.

Validation runs after assembly and never blocks it; use
:meth:`ReportAssembler.assemble_validated` to get both together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from src.config.settings import Settings, get_settings
from src.data.sector_registry import DEFAULT_REGISTRY, NON_OIL_TOTAL_CODE, SectorRegistry
from src.engine.aggregator import (
    build_aggregate,
    build_sector_records,
    split_by_category,
    top_sectors,
    total_of,
)
from src.engine.insights import derive_insights
from src.models.common import utc_now
from src.models.sector import (
    ReportAggregates,
    ReportMetadata,
    SectorReport,
    SectorSnapshot,
)
from src.quality.config import ValidationConfig
from src.quality.models import ValidationResult
from src.quality.validator import ReportValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedReport:
    """A report together with its validation verdict."""

    report: SectorReport
    validation: ValidationResult

    @property
    def valid(self) -> bool:
        return self.validation.valid


class ReportAssembler:
    """Builds SectorReports from current / prior snapshots.

    Holds only read-only collaborators (registry, settings, validator), so a
    single instance can be shared between threads.
    """

    def __init__(
        self,
        registry: SectorRegistry | None = None,
        settings: Settings | None = None,
        validator: ReportValidator | None = None,
        top_n: int | None = None,
    ) -> None:
        self._registry = registry or DEFAULT_REGISTRY
        self._settings = settings or get_settings()
        self._validator = validator or ReportValidator(
            ValidationConfig.from_settings(self._settings),
        )
        self._top_n = (
            top_n if top_n is not None else self._settings.TOP_SECTOR_COUNT
        )

    def assemble(
        self,
        current: SectorSnapshot,
        prior: SectorSnapshot,
        *,
        generated_at: datetime | None = None,
        unit: str | None = None,
        data_source: str | None = None,
    ) -> SectorReport:
        """Compute the sectoral breakdown of *current* against *prior*.

        Args:
            current: Reporting-period snapshot, including the ``_T`` total.
            prior: Comparison-period snapshot.
            generated_at: Timestamp to stamp on the report (default: now).
            unit: Overrides the configured monetary unit label.
            data_source: Overrides the configured data source label.

        Returns:
            The assembled report. It is not validated.

        Raises:
            SectorDataError: The snapshots are structurally unusable
                (unknown code, no sectors, missing total, mismatched codes,
                zero total). No partial report is returned.
        """
        records = build_sector_records(current, prior, self._registry)
        total = total_of(current)

        oil_records, non_oil_records = split_by_category(records)
        aggregates = ReportAggregates(
            oil=build_aggregate(oil_records, total),
            non_oil=build_aggregate(non_oil_records, total),
            top_three=top_sectors(records, self._top_n),
        )

        insights = derive_insights(records)

        non_oil_total = current.get(NON_OIL_TOTAL_CODE)
        metadata = ReportMetadata(
            year=current.year,
            comparison_year=prior.year,
            unit=unit or self._settings.REPORT_UNIT,
            data_source=data_source or self._settings.REPORT_DATA_SOURCE,
            price_type=self._settings.REPORT_PRICE_TYPE,
            base_year=self._settings.REPORT_BASE_YEAR,
            total_value=total,
            total_non_oil_value=(
                float(non_oil_total) if non_oil_total is not None else None
            ),
            generated_at=generated_at or utc_now(),
        )

        logger.debug(
            "Assembled %d-sector report for %d vs %d (diversification=%.2f)",
            insights.sector_count, current.year, prior.year,
            insights.diversification_index,
        )

        return SectorReport(
            metadata=metadata,
            sectors=records,
            aggregates=aggregates,
            insights=insights,
        )

    def validate(self, report: SectorReport) -> ValidationResult:
        return self._validator.validate(report)

    def assemble_validated(
        self,
        current: SectorSnapshot,
        prior: SectorSnapshot,
        *,
        generated_at: datetime | None = None,
        unit: str | None = None,
        data_source: str | None = None,
    ) -> ValidatedReport:
        """Assemble a report and attach its validation verdict."""
        report = self.assemble(
            current,
            prior,
            generated_at=generated_at,
            unit=unit,
            data_source=data_source,
        )
        return ValidatedReport(report=report, validation=self.validate(report))


def build_sector_report(
    current: SectorSnapshot,
    prior: SectorSnapshot,
    *,
    registry: SectorRegistry | None = None,
    settings: Settings | None = None,
    generated_at: datetime | None = None,
) -> SectorReport:
    """One-shot convenience wrapper around :meth:`ReportAssembler.assemble`."""
    assembler = ReportAssembler(registry=registry, settings=settings)
    return assembler.assemble(current, prior, generated_at=generated_at)
