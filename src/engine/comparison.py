"""Growth comparison view over a SectorReport.

Picks a fixed set of headline sectors for side-by-side growth charts and
shortens their display names.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.models.sector import SectorReport

# Oil, manufacturing, construction, trade, real estate, finance.
KEY_SECTOR_CODES: tuple[str, ...] = ("B", "C", "F", "G", "L", "K")


@dataclass(frozen=True)
class SectorGrowthPoint:
    code: str
    sector: str
    growth: float | None


def short_name(name: str, words: int = 3) -> str:
    """First *words* words of a sector display name."""
    return " ".join(name.split()[:words])


def sector_growth_comparison(
    report: SectorReport,
    codes: tuple[str, ...] | list[str] = KEY_SECTOR_CODES,
    name_words: int = 3,
) -> list[SectorGrowthPoint]:
    """Growth of the selected sectors, in report rank order.

    Codes absent from the report are skipped.
    """
    wanted = set(codes)
    return [
        SectorGrowthPoint(
            code=s.code,
            sector=short_name(s.name, name_words),
            growth=s.yoy_growth_percent,
        )
        for s in report.sectors
        if s.code in wanted
    ]
