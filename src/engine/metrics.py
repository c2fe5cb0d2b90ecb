"""Per-sector metric formulas: share of total and year-over-year growth.

Pure deterministic functions. Every derived figure is rounded to two
decimals with half-away-from-zero rounding so outputs are reproducible
across platforms.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from src.errors import DivisionByZeroError


def round_half_away(value: float, places: int = 2) -> float:
    """Round *value* to *places* decimals, halves away from zero.

    Works on the shortest decimal representation of the float, so
    ``round_half_away(2.675)`` is ``2.68`` (builtin ``round`` gives 2.67).
    """
    quantum = Decimal(1).scaleb(-places)
    # Wide enough for any finite float carried to *places* decimals.
    with localcontext() as ctx:
        ctx.prec = 330 + places
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def percentage(value: float, total: float) -> float:
    """Share of *total* held by *value*, in percent.

    Formula: (value / total) * 100

    Raises:
        DivisionByZeroError: If *total* is zero.
    """
    if total == 0:
        msg = f"Cannot compute percentage of {value} against a zero total"
        raise DivisionByZeroError(msg)
    return round_half_away(value / total * 100.0)


def yoy_growth(value_current: float, value_prior: float) -> float:
    """Year-over-year growth rate, in percent.

    Formula: ((current - prior) / prior) * 100

    Raises:
        DivisionByZeroError: If *value_prior* is zero.
    """
    if value_prior == 0:
        msg = "Growth rate is undefined for a zero prior-period value"
        raise DivisionByZeroError(msg)
    return round_half_away((value_current - value_prior) / value_prior * 100.0)


def safe_yoy_growth(value_current: float, value_prior: float) -> float | None:
    """Like :func:`yoy_growth` but returns ``None`` for a zero prior value."""
    try:
        return yoy_growth(value_current, value_prior)
    except DivisionByZeroError:
        return None
