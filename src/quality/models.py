"""Validation enums and result models.

A ValidationResult keeps the plain ``errors`` / ``warnings`` message lists
the dashboard consumes, plus a structured ``findings`` list recording which
rule produced each message.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from src.models.common import AnalyticsBase


# ---------------------------------------------------------------------------
# Enums (all StrEnum)
# ---------------------------------------------------------------------------


class ValidationSeverity(StrEnum):
    """ERROR findings make a report invalid; WARNING findings do not."""

    ERROR = "ERROR"
    WARNING = "WARNING"


class ValidationRule(StrEnum):
    """The consistency rules evaluated against a report."""

    TOTAL_SUM = "TOTAL_SUM"
    PERCENTAGE_SUM = "PERCENTAGE_SUM"
    NON_NEGATIVE = "NON_NEGATIVE"
    SECTOR_COUNT = "SECTOR_COUNT"
    GROWTH_RANGE = "GROWTH_RANGE"
    UNDEFINED_GROWTH = "UNDEFINED_GROWTH"
    NON_OIL_TOTAL = "NON_OIL_TOTAL"


# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ValidationFinding(AnalyticsBase, frozen=True):
    """A single rule violation."""

    rule: ValidationRule
    severity: ValidationSeverity
    message: str
    sector_code: str | None = Field(default=None, alias="sectorCode")


class ValidationResult(AnalyticsBase, frozen=True):
    """Verdict for one report. ``valid`` is False iff there are errors."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    findings: list[ValidationFinding] = Field(default_factory=list)

    @classmethod
    def from_findings(cls, findings: list[ValidationFinding]) -> ValidationResult:
        errors = [
            f.message for f in findings if f.severity == ValidationSeverity.ERROR
        ]
        warnings = [
            f.message for f in findings if f.severity == ValidationSeverity.WARNING
        ]
        return cls(
            valid=not errors,
            errors=errors,
            warnings=warnings,
            findings=list(findings),
        )

    def rules_triggered(self) -> list[ValidationRule]:
        """Distinct rules with at least one finding, in first-seen order."""
        seen: list[ValidationRule] = []
        for finding in self.findings:
            if finding.rule not in seen:
                seen.append(finding.rule)
        return seen
