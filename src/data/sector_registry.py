"""Sector registry: ISIC section codes with display names and oil category.

The registry is static reference data built once at import time. Lookups
are read-only; there is no runtime mutation.

Reserved aggregate codes (``_T``, ``_TNO``, ``NFC``) carry a display name but
no category. They are excluded from per-sector iteration.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from src.errors import UnknownSectorCodeError
from src.models.sector import SectorCategory

TOTAL_CODE = "_T"
NON_OIL_TOTAL_CODE = "_TNO"


@dataclass(frozen=True)
class SectorDefinition:
    """Canonical name and category for one sector code."""

    code: str
    name: str
    category: SectorCategory


# (code, name, category) for the 17 ISIC sections reported in the national
# accounts. Only section B (oil & gas extraction) is classified as oil.
_ISIC_SECTIONS: list[tuple[str, str, SectorCategory]] = [
    ("A", "Agriculture, Forestry and Fishing", SectorCategory.NON_OIL),
    ("B", "Mining and Quarrying (includes Oil & Gas)", SectorCategory.OIL),
    ("C", "Manufacturing", SectorCategory.NON_OIL),
    ("DE", "Electricity, Gas, Water Supply; Waste Management", SectorCategory.NON_OIL),
    ("F", "Construction", SectorCategory.NON_OIL),
    ("G", "Wholesale and Retail Trade", SectorCategory.NON_OIL),
    ("H", "Transportation and Storage", SectorCategory.NON_OIL),
    ("I", "Accommodation and Food Service Activities", SectorCategory.NON_OIL),
    ("J", "Information and Communication", SectorCategory.NON_OIL),
    ("K", "Financial and Insurance Activities", SectorCategory.NON_OIL),
    ("L", "Real Estate Activities", SectorCategory.NON_OIL),
    ("MN", "Professional, Scientific and Technical Activities", SectorCategory.NON_OIL),
    ("O", "Public Administration and Defence", SectorCategory.NON_OIL),
    ("P", "Education", SectorCategory.NON_OIL),
    ("Q", "Human Health and Social Work Activities", SectorCategory.NON_OIL),
    ("RS", "Arts, Recreation and Other Service Activities", SectorCategory.NON_OIL),
    ("T", "Activities of Households as Employers", SectorCategory.NON_OIL),
]

_AGGREGATE_CODES: dict[str, str] = {
    TOTAL_CODE: "Total GDP",
    NON_OIL_TOTAL_CODE: "Total Non-Oil GDP",
    "NFC": "Non-Financial Corporations",
}


class SectorRegistry:
    """Read-only lookup from sector code to name and category."""

    def __init__(
        self,
        sectors: Iterable[SectorDefinition],
        aggregates: Mapping[str, str] | None = None,
    ) -> None:
        table: dict[str, SectorDefinition] = {}
        for definition in sectors:
            if definition.code in table:
                msg = f"Duplicate sector code in registry: '{definition.code}'"
                raise ValueError(msg)
            table[definition.code] = definition

        aggregate_table = dict(aggregates or {})
        overlap = set(table) & set(aggregate_table)
        if overlap:
            msg = f"Codes registered as both sector and aggregate: {sorted(overlap)}"
            raise ValueError(msg)

        self._sectors: Mapping[str, SectorDefinition] = MappingProxyType(table)
        self._aggregates: Mapping[str, str] = MappingProxyType(aggregate_table)

    # -----------------------------------------------------------------
    # Lookups
    # -----------------------------------------------------------------

    def get(self, code: str) -> SectorDefinition:
        """Return the definition of a non-aggregate sector code.

        Raises:
            UnknownSectorCodeError: If *code* is not a registered sector.
        """
        try:
            return self._sectors[code]
        except KeyError:
            if code in self._aggregates:
                msg = f"'{code}' is an aggregate code, not a sector"
                raise UnknownSectorCodeError(code, msg) from None
            raise UnknownSectorCodeError(code) from None

    def name_of(self, code: str) -> str:
        """Display name for a sector or aggregate code."""
        if code in self._aggregates:
            return self._aggregates[code]
        return self.get(code).name

    def category_of(self, code: str) -> SectorCategory:
        return self.get(code).category

    def is_aggregate(self, code: str) -> bool:
        return code in self._aggregates

    @property
    def sector_codes(self) -> list[str]:
        """Registered sector codes in registry order (aggregates excluded)."""
        return list(self._sectors)

    @property
    def aggregate_codes(self) -> frozenset[str]:
        return frozenset(self._aggregates)

    def __contains__(self, code: object) -> bool:
        return code in self._sectors or code in self._aggregates

    def __len__(self) -> int:
        return len(self._sectors)


DEFAULT_REGISTRY = SectorRegistry(
    (SectorDefinition(code, name, category) for code, name, category in _ISIC_SECTIONS),
    _AGGREGATE_CODES,
)
