"""Report validator: cross-field consistency checks on a SectorReport.

Each ``check_*`` method evaluates one rule independently and returns zero
or more findings; ``validate`` runs them all and folds the findings into a
ValidationResult. Bad data never raises here: the report was already
produced and callers decide how to react.

Deterministic -- no I/O.
"""

from __future__ import annotations

import logging

from src.models.sector import SectorReport
from src.quality.config import ValidationConfig
from src.quality.models import (
    ValidationFinding,
    ValidationResult,
    ValidationRule,
    ValidationSeverity,
)

logger = logging.getLogger(__name__)


class ReportValidator:
    """Checks sum consistency, value signs, cardinality and growth bounds."""

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config or ValidationConfig()

    @property
    def config(self) -> ValidationConfig:
        return self._config

    # ---------------------------------------------------------------
    # Rule checks
    # ---------------------------------------------------------------

    def check_total_sum(self, report: SectorReport) -> list[ValidationFinding]:
        """Sum of sector values must match total GDP within a relative tolerance.

        * |sum - total| > tolerance * |total| -> ERROR
        """
        total = report.metadata.total_value
        sum_of_sectors = sum(s.value_current for s in report.sectors)
        tolerance = abs(total) * self._config.total_sum_tolerance

        if abs(sum_of_sectors - total) > tolerance:
            return [
                ValidationFinding(
                    rule=ValidationRule.TOTAL_SUM,
                    severity=ValidationSeverity.ERROR,
                    message=(
                        f"Sum of sectors ({sum_of_sectors:.2f}) does not equal "
                        f"total GDP ({total:.2f})"
                    ),
                )
            ]
        return []

    def check_percentage_sum(self, report: SectorReport) -> list[ValidationFinding]:
        """Sector shares should add up to ~100%.

        * |sum - 100| > tolerance -> WARNING (rounding drift is expected)
        """
        sum_of_percentages = sum(s.percentage_of_total for s in report.sectors)

        if abs(sum_of_percentages - 100.0) > self._config.percentage_sum_tolerance:
            return [
                ValidationFinding(
                    rule=ValidationRule.PERCENTAGE_SUM,
                    severity=ValidationSeverity.WARNING,
                    message=(
                        f"Sector percentages sum to {sum_of_percentages:.2f}%, "
                        f"expected ~100%"
                    ),
                )
            ]
        return []

    def check_non_negative(self, report: SectorReport) -> list[ValidationFinding]:
        """One ERROR per sector with a negative current or prior value."""
        return [
            ValidationFinding(
                rule=ValidationRule.NON_NEGATIVE,
                severity=ValidationSeverity.ERROR,
                message=f"Sector {s.code} has negative values",
                sector_code=s.code,
            )
            for s in report.sectors
            if s.value_current < 0 or s.value_prior < 0
        ]

    def check_sector_count(self, report: SectorReport) -> list[ValidationFinding]:
        """WARNING when the sector count differs from the configured count."""
        expected = self._config.expected_sector_count
        found = len(report.sectors)

        if found != expected:
            return [
                ValidationFinding(
                    rule=ValidationRule.SECTOR_COUNT,
                    severity=ValidationSeverity.WARNING,
                    message=f"Expected {expected} sectors, found {found}",
                )
            ]
        return []

    def check_growth_range(self, report: SectorReport) -> list[ValidationFinding]:
        """One WARNING per sector whose growth falls outside the plausible band.

        Sectors with undefined growth are handled by
        :meth:`check_undefined_growth`.
        """
        low = self._config.growth_min_pct
        high = self._config.growth_max_pct
        findings: list[ValidationFinding] = []

        for s in report.sectors:
            growth = s.yoy_growth_percent
            if growth is None:
                continue
            if growth < low or growth > high:
                findings.append(
                    ValidationFinding(
                        rule=ValidationRule.GROWTH_RANGE,
                        severity=ValidationSeverity.WARNING,
                        message=f"Sector {s.code} has unusual growth rate: {growth}%",
                        sector_code=s.code,
                    )
                )

        return findings

    def check_undefined_growth(self, report: SectorReport) -> list[ValidationFinding]:
        """One WARNING per sector whose prior value was zero."""
        return [
            ValidationFinding(
                rule=ValidationRule.UNDEFINED_GROWTH,
                severity=ValidationSeverity.WARNING,
                message=(
                    f"Sector {s.code} has undefined growth rate "
                    f"(comparison value is zero)"
                ),
                sector_code=s.code,
            )
            for s in report.sectors
            if s.yoy_growth_percent is None
        ]

    def check_non_oil_total(self, report: SectorReport) -> list[ValidationFinding]:
        """Non-oil aggregate vs the reported non-oil total, when one is given.

        * relative difference > tolerance -> WARNING
        """
        reported = report.metadata.total_non_oil_value
        if reported is None:
            return []

        computed = report.aggregates.non_oil.value
        tolerance = abs(reported) * self._config.non_oil_tolerance

        if abs(computed - reported) > tolerance:
            return [
                ValidationFinding(
                    rule=ValidationRule.NON_OIL_TOTAL,
                    severity=ValidationSeverity.WARNING,
                    message=(
                        f"Non-oil aggregate ({computed:.2f}) does not match "
                        f"reported non-oil GDP ({reported:.2f})"
                    ),
                )
            ]
        return []

    # ---------------------------------------------------------------
    # Aggregation
    # ---------------------------------------------------------------

    def validate(self, report: SectorReport) -> ValidationResult:
        """Run every rule and combine the findings."""
        checks = (
            self.check_total_sum,
            self.check_percentage_sum,
            self.check_non_negative,
            self.check_sector_count,
            self.check_growth_range,
            self.check_undefined_growth,
            self.check_non_oil_total,
        )

        findings: list[ValidationFinding] = []
        for check in checks:
            findings.extend(check(report))

        result = ValidationResult.from_findings(findings)
        if not result.valid:
            logger.warning(
                "Report for %d failed validation with %d error(s)",
                report.metadata.year, len(result.errors),
            )
        return result


def validate_report(
    report: SectorReport,
    config: ValidationConfig | None = None,
) -> ValidationResult:
    """Validate *report* with a one-off :class:`ReportValidator`."""
    return ReportValidator(config).validate(report)
