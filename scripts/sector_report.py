"""Standalone sectoral GDP report script.

Loads current / comparison snapshots from JSON, assembles the sectoral
breakdown, validates it and prints a summary (or the JSON payload).

Usage:
    python -m scripts.sector_report data/sample/sectoral_gdp_2024.json
    python -m scripts.sector_report --json data/sample/sectoral_gdp_2024.json

Input format:
    {
        "unit": "Million AED",            (optional)
        "data_source": "...",             (optional)
        "current": {"year": 2024, "values": {"A": 19234.56, ..., "_T": ...}},
        "prior":   {"year": 2023, "values": {"A": 18450.32, ...}}
    }

Exit status: 0 valid, 1 validation errors, 2 unusable snapshots.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.config.settings import get_settings
from src.engine.report import ReportAssembler, ValidatedReport
from src.errors import SectorDataError
from src.models.sector import SectorReport, SectorSnapshot
from src.observability.log_config import configure_logging

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNUSABLE = 2


def load_snapshots(path: Path) -> tuple[SectorSnapshot, SectorSnapshot, dict[str, Any]]:
    """Read (current, prior, options) from a snapshot JSON document."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    current = SectorSnapshot.model_validate(data["current"])
    prior = SectorSnapshot.model_validate(data["prior"])
    options = {
        key: data[key] for key in ("unit", "data_source") if data.get(key)
    }
    return current, prior, options


def _print_header(report: SectorReport) -> None:
    """Print report header."""
    meta = report.metadata
    w = 72
    print("=" * w)
    print("  Sectoral Contribution Breakdown")
    print(f"  {meta.data_source}")
    print("=" * w)
    print(f"  Period: {meta.year} vs {meta.comparison_year}")
    print(f"  Total GDP: {meta.total_value:,.2f} {meta.unit}")


def _print_sector_table(report: SectorReport) -> None:
    """Print per-sector table in rank order."""
    print()
    print(f"  {'#':>2} {'Sector':<6} {'Name':<35} {'Value':>14} {'Share':>7} {'YoY':>7}")
    print(
        f"  {'--':>2} {'------':<6} {'-----------------------------------':<35}"
        f" {'--------------':>14} {'-------':>7} {'-------':>7}"
    )
    for s in report.sectors:
        growth = f"{s.yoy_growth_percent:>6.2f}%" if s.yoy_growth_percent is not None else "    n/a"
        print(
            f"  {s.rank:>2} {s.code:<6} {s.name[:35]:<35}"
            f" {s.value_current:>14,.2f} {s.percentage_of_total:>6.2f}% {growth}"
        )


def _print_insights(report: SectorReport) -> None:
    agg = report.aggregates
    ins = report.insights
    print()
    print(f"  Oil:     {agg.oil.value:>14,.2f} ({agg.oil.percentage_of_total:.2f}%)")
    print(f"  Non-oil: {agg.non_oil.value:>14,.2f} ({agg.non_oil.percentage_of_total:.2f}%)")
    print(f"  Diversification index: {ins.diversification_index:.2f}")
    print(f"  Top sector dominance:  {ins.dominance_label.value}")
    if ins.fastest_growing_sector is not None:
        fg = ins.fastest_growing_sector
        print(f"  Fastest growing:       {fg.code} {fg.name} ({fg.growth:+.2f}%)")


def _print_validation(result: ValidatedReport) -> None:
    """Print validation summary."""
    print()
    print(f"  Validation: {'PASS' if result.valid else 'FAIL'}")
    for message in result.validation.errors:
        print(f"    ERROR   {message}")
    for message in result.validation.warnings:
        print(f"    WARNING {message}")


def main(argv: list[str] | None = None) -> int:
    """Run the report and return the process exit status."""
    parser = argparse.ArgumentParser(
        description="Build and validate a sectoral GDP report from snapshot JSON",
    )
    parser.add_argument("snapshot_path", type=Path, help="Path to snapshot JSON")
    parser.add_argument(
        "--json", action="store_true",
        help="Print the report and validation as JSON instead of a table",
    )
    parser.add_argument(
        "--expected-sectors", type=int, default=None,
        help="Override the expected sector count used by validation",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.expected_sectors is not None:
        settings = settings.model_copy(
            update={"EXPECTED_SECTOR_COUNT": args.expected_sectors},
        )
    log = configure_logging(settings)

    try:
        current, prior, options = load_snapshots(args.snapshot_path)
        result = ReportAssembler(settings=settings).assemble_validated(
            current, prior, **options,
        )
    except SectorDataError as exc:
        log.error("report_assembly_failed", path=str(args.snapshot_path), error=str(exc))
        return EXIT_UNUSABLE
    except (OSError, KeyError, json.JSONDecodeError, ValidationError) as exc:
        log.error("snapshot_load_failed", path=str(args.snapshot_path), error=str(exc))
        return EXIT_UNUSABLE

    log.info(
        "report_built",
        year=result.report.metadata.year,
        sectors=result.report.insights.sector_count,
        valid=result.valid,
    )

    if args.json:
        payload = {
            "report": result.report.to_payload(),
            "validation": result.validation.model_dump(mode="json", by_alias=True),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        _print_header(result.report)
        _print_sector_table(result.report)
        _print_insights(result.report)
        _print_validation(result)

    return EXIT_OK if result.valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
