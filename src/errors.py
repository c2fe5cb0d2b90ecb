"""Structural failures raised by the sector analytics pipeline.

These abort report assembly. Validation findings are never raised; they are
returned as data on :class:`src.quality.models.ValidationResult`.
"""

from __future__ import annotations


class SectorDataError(ValueError):
    """Base class for snapshots that cannot be turned into a report."""


class UnknownSectorCodeError(SectorDataError, KeyError):
    """A snapshot contains a code absent from the sector registry."""

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or f"Unknown sector code: '{code}'")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class EmptyDatasetError(SectorDataError):
    """The current snapshot has no non-aggregate sectors."""


class SnapshotMismatchError(SectorDataError):
    """A sector in the current snapshot has no value in the prior snapshot."""


class MissingTotalError(SectorDataError):
    """The current snapshot lacks the reserved total GDP code."""


class DivisionByZeroError(SectorDataError, ZeroDivisionError):
    """A percentage or growth rate was requested against a zero base."""
