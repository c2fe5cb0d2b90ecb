"""Tests for insight derivation: diversification, dominance, fastest grower."""

from __future__ import annotations

import pytest

from src.engine.insights import (
    derive_insights,
    diversification_index,
    dominance_label,
    fastest_growing,
)
from src.models.sector import DominanceLabel, SectorCategory, SectorRecord


def _record(
    code: str,
    pct: float,
    growth: float | None = 0.0,
    rank: int = 1,
) -> SectorRecord:
    return SectorRecord(
        code=code,
        name=f"Sector {code}",
        category=SectorCategory.NON_OIL,
        value_current=pct,
        value_prior=pct,
        percentage_of_total=pct,
        yoy_growth_percent=growth,
        rank=rank,
    )


# ===================================================================
# Diversification index
# ===================================================================


class TestDiversificationIndex:
    """Inverted, normalised HHI."""

    def test_two_sector_example(self) -> None:
        """Shares [0.75, 0.25] -> HHI 0.625 -> (1-0.625)/(1-0.5) = 0.75."""
        records = [_record("B", 75.0, rank=1), _record("A", 25.0, rank=2)]
        assert diversification_index(records) == 0.75

    def test_single_sector_is_zero(self) -> None:
        assert diversification_index([_record("A", 100.0)]) == 0.0

    def test_no_sectors_is_zero(self) -> None:
        assert diversification_index([]) == 0.0

    def test_equal_shares_is_one(self) -> None:
        records = [_record(c, 25.0, rank=i) for i, c in enumerate("ABCD", start=1)]
        assert diversification_index(records) == 1.0

    def test_one_sector_holds_everything(self) -> None:
        records = [_record("A", 100.0, rank=1), _record("B", 0.0, rank=2)]
        assert diversification_index(records) == 0.0

    def test_clamped_to_unit_interval(self) -> None:
        """Percentages summing above 100 cannot push the index below 0."""
        records = [_record("A", 120.0, rank=1), _record("B", 30.0, rank=2)]
        assert diversification_index(records) == 0.0

    def test_more_equal_is_more_diversified(self) -> None:
        skewed = [_record("A", 90.0, rank=1), _record("B", 10.0, rank=2)]
        balanced = [_record("A", 60.0, rank=1), _record("B", 40.0, rank=2)]
        assert diversification_index(balanced) > diversification_index(skewed)


# ===================================================================
# Dominance label
# ===================================================================


class TestDominanceLabel:
    @pytest.mark.parametrize(
        ("pct", "expected"),
        [
            (12.5, DominanceLabel.LOW),
            (19.99, DominanceLabel.LOW),
            (20.0, DominanceLabel.MEDIUM),
            (29.99, DominanceLabel.MEDIUM),
            (30.0, DominanceLabel.HIGH),
            (75.0, DominanceLabel.HIGH),
        ],
    )
    def test_thresholds(self, pct: float, expected: DominanceLabel) -> None:
        assert dominance_label(pct) == expected


# ===================================================================
# Fastest growing
# ===================================================================


class TestFastestGrowing:
    def test_highest_growth_wins(self) -> None:
        records = [
            _record("A", 50.0, growth=2.0, rank=1),
            _record("B", 30.0, growth=7.5, rank=2),
            _record("C", 20.0, growth=-1.0, rank=3),
        ]
        assert fastest_growing(records).code == "B"  # type: ignore[union-attr]

    def test_tie_goes_to_higher_rank(self) -> None:
        records = [
            _record("A", 50.0, growth=5.0, rank=1),
            _record("B", 30.0, growth=5.0, rank=2),
        ]
        assert fastest_growing(records).code == "A"  # type: ignore[union-attr]

    def test_undefined_growth_skipped(self) -> None:
        records = [
            _record("A", 50.0, growth=None, rank=1),
            _record("B", 30.0, growth=-3.0, rank=2),
        ]
        assert fastest_growing(records).code == "B"  # type: ignore[union-attr]

    def test_all_undefined(self) -> None:
        assert fastest_growing([_record("A", 100.0, growth=None)]) is None


# ===================================================================
# Insights block
# ===================================================================


class TestDeriveInsights:
    def test_two_sector_example(self) -> None:
        records = [
            _record("B", 75.0, growth=0.0, rank=1),
            _record("A", 25.0, growth=25.0, rank=2),
        ]
        insights = derive_insights(records)

        assert insights.diversification_index == 0.75
        assert insights.dominance_label == DominanceLabel.HIGH
        assert insights.fastest_growing_sector is not None
        assert insights.fastest_growing_sector.code == "A"
        assert insights.fastest_growing_sector.growth == 25.0
        assert insights.sector_count == 2

    def test_no_defined_growth(self) -> None:
        insights = derive_insights([_record("A", 100.0, growth=None)])
        assert insights.fastest_growing_sector is None
        assert insights.diversification_index == 0.0
