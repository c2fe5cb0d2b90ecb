"""Insight derivation: diversification, dominance and fastest grower.

Works on ranked SectorRecords from :mod:`src.engine.aggregator`.
"""

from __future__ import annotations

import numpy as np

from src.engine.metrics import round_half_away
from src.models.sector import (
    DominanceLabel,
    FastestGrowingSector,
    Insights,
    SectorRecord,
)

# Top-sector share thresholds (percent).
DOMINANCE_MEDIUM_MIN = 20.0
DOMINANCE_HIGH_MIN = 30.0


def diversification_index(records: list[SectorRecord]) -> float:
    """Inverted, normalised Herfindahl-Hirschman index in [0, 1].

    HHI = sum(share_i ** 2) with share_i = percentage_i / 100, then
    index = (1 - HHI) / (1 - 1/N). 1 means all sectors hold equal shares,
    0 means one sector holds everything. A single sector scores 0.
    """
    n = len(records)
    if n <= 1:
        return 0.0

    shares = np.array([r.percentage_of_total for r in records], dtype=np.float64) / 100.0
    hhi = float(np.sum(shares**2))
    max_hhi = 1.0
    min_hhi = 1.0 / n
    normalised = (max_hhi - hhi) / (max_hhi - min_hhi)

    # Rounding drift in the percentages can push the raw value slightly
    # outside the unit interval.
    return round_half_away(min(1.0, max(0.0, normalised)))


def dominance_label(top_percentage: float) -> DominanceLabel:
    """Classify the top sector's share of the total."""
    if top_percentage < DOMINANCE_MEDIUM_MIN:
        return DominanceLabel.LOW
    if top_percentage < DOMINANCE_HIGH_MIN:
        return DominanceLabel.MEDIUM
    return DominanceLabel.HIGH


def fastest_growing(records: list[SectorRecord]) -> SectorRecord | None:
    """Record with the highest defined growth; first in rank order on ties."""
    best: SectorRecord | None = None
    for record in records:
        growth = record.yoy_growth_percent
        if growth is None:
            continue
        if best is None or growth > best.yoy_growth_percent:  # type: ignore[operator]
            best = record
    return best


def derive_insights(records: list[SectorRecord]) -> Insights:
    """Build the Insights block for rank-ordered *records*."""
    top = records[0].percentage_of_total if records else 0.0
    fastest = fastest_growing(records)

    return Insights(
        diversification_index=diversification_index(records),
        dominance_label=dominance_label(top),
        fastest_growing_sector=(
            FastestGrowingSector(
                code=fastest.code,
                name=fastest.name,
                growth=fastest.yoy_growth_percent,  # type: ignore[arg-type]
            )
            if fastest is not None
            else None
        ),
        sector_count=len(records),
    )
