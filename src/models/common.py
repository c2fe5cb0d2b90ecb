"""Shared types and base model used across the sector analytics domain models."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    """Return the current UTC timestamp (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


# --- Reusable annotated types ---

UTCTimestamp = Annotated[
    datetime, Field(description="UTC timezone-aware timestamp.")
]
Percent = Annotated[float, Field(description="Percentage, rounded to 2 decimals.")]


# --- Base model ---


class AnalyticsBase(BaseModel):
    """Base model with common configuration for all sector analytics models.

    Fields that appear in camelCase on the wire declare an alias; both the
    Python name and the alias are accepted on input.
    """

    model_config = {
        "populate_by_name": True,
        "protected_namespaces": (),
    }
