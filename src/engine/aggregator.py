"""Sector aggregation: build ranked sector records and oil/non-oil totals.

Deterministic: ranking sorts by value descending with the sector code as
tie-breaker, so identical snapshots always produce identical rankings.
"""

from __future__ import annotations

import logging

import numpy as np

from src.data.sector_registry import DEFAULT_REGISTRY, TOTAL_CODE, SectorRegistry
from src.engine.metrics import percentage, round_half_away, safe_yoy_growth
from src.errors import (
    EmptyDatasetError,
    MissingTotalError,
    SnapshotMismatchError,
    UnknownSectorCodeError,
)
from src.models.sector import (
    AggregateRecord,
    SectorCategory,
    SectorRecord,
    SectorSnapshot,
    TopSector,
)

logger = logging.getLogger(__name__)


def _sector_codes(snapshot: SectorSnapshot, registry: SectorRegistry) -> list[str]:
    """Non-aggregate codes of *snapshot*, rejecting anything unregistered."""
    codes: list[str] = []
    for code in snapshot.values:
        if code not in registry:
            logger.warning(
                "Snapshot %d contains unknown sector code %r", snapshot.year, code,
            )
            raise UnknownSectorCodeError(code)
        if not registry.is_aggregate(code):
            codes.append(code)
    return codes


def total_of(snapshot: SectorSnapshot) -> float:
    """Reserved total GDP value of *snapshot*.

    Raises:
        MissingTotalError: If the snapshot has no ``_T`` entry.
    """
    total = snapshot.get(TOTAL_CODE)
    if total is None:
        msg = f"Snapshot {snapshot.year} has no total GDP entry ('{TOTAL_CODE}')"
        raise MissingTotalError(msg)
    return float(total)


def build_sector_records(
    current: SectorSnapshot,
    prior: SectorSnapshot,
    registry: SectorRegistry = DEFAULT_REGISTRY,
) -> list[SectorRecord]:
    """Compute share, growth and rank for every sector in *current*.

    Args:
        current: Snapshot for the reporting period (must include ``_T``).
        prior: Snapshot for the comparison period.
        registry: Code -> name/category lookup.

    Returns:
        SectorRecords ordered by rank (value descending, then code).

    Raises:
        UnknownSectorCodeError: A code in either snapshot is not registered.
        EmptyDatasetError: *current* holds no non-aggregate sectors.
        SnapshotMismatchError: A current sector is missing from *prior*.
        MissingTotalError: *current* has no ``_T`` entry.
        DivisionByZeroError: The current total is zero.
    """
    codes = _sector_codes(current, registry)
    prior_codes = set(_sector_codes(prior, registry))

    if not codes:
        msg = f"Snapshot {current.year} contains no sector values"
        raise EmptyDatasetError(msg)

    missing = sorted(set(codes) - prior_codes)
    if missing:
        msg = (
            f"Sectors {missing} have no value in comparison snapshot "
            f"{prior.year}"
        )
        raise SnapshotMismatchError(msg)

    extra = sorted(prior_codes - set(codes))
    if extra:
        logger.info(
            "Ignoring sectors %s present only in comparison snapshot %d",
            extra, prior.year,
        )

    total = total_of(current)

    # Rank on the reported (rounded) value, code ascending on ties.
    ordered = sorted(
        codes, key=lambda c: (-round_half_away(float(current.values[c])), c),
    )

    records: list[SectorRecord] = []
    for rank, code in enumerate(ordered, start=1):
        value = float(current.values[code])
        value_prior = float(prior.values[code])
        growth = safe_yoy_growth(value, value_prior)
        if growth is None:
            logger.warning(
                "Sector %s has a zero value in %d; growth rate left undefined",
                code, prior.year,
            )
        records.append(
            SectorRecord(
                code=code,
                name=registry.name_of(code),
                category=registry.category_of(code),
                value_current=round_half_away(value),
                value_prior=round_half_away(value_prior),
                percentage_of_total=percentage(value, total),
                yoy_growth_percent=growth,
                rank=rank,
            )
        )

    return records


def split_by_category(
    records: list[SectorRecord],
) -> tuple[list[SectorRecord], list[SectorRecord]]:
    """Partition records into (oil, non-oil), preserving rank order."""
    oil = [r for r in records if r.category == SectorCategory.OIL]
    non_oil = [r for r in records if r.category != SectorCategory.OIL]
    return oil, non_oil


def build_aggregate(records: list[SectorRecord], total: float) -> AggregateRecord:
    """Sum a group of sectors and compute its share and growth.

    An empty group yields a zero aggregate with undefined growth.
    """
    value = float(np.sum([r.value_current for r in records], dtype=np.float64))
    value_prior = float(np.sum([r.value_prior for r in records], dtype=np.float64))
    return AggregateRecord(
        value=round_half_away(value),
        percentage_of_total=percentage(value, total),
        yoy_growth_percent=safe_yoy_growth(value, value_prior),
    )


def top_sectors(records: list[SectorRecord], n: int = 3) -> list[TopSector]:
    """Name and share of the first *n* records in rank order."""
    return [
        TopSector(code=r.code, name=r.name, percentage=r.percentage_of_total)
        for r in records[:n]
    ]
