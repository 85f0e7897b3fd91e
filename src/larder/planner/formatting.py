"""Quantity parsing and display helpers shared by planner modules."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_TRAILING_ZEROS_RE = re.compile(r"\.?0+$")
_CENTS = Decimal("0.01")

COUNT_UNIT = "count"


def is_absent(quantity: object) -> bool:
    """True when a quantity carries no information at all."""
    return quantity is None or (isinstance(quantity, str) and not quantity.strip())


def parse_numeric(quantity: object) -> Optional[float]:
    """Return the finite numeric value of ``quantity``, or ``None`` when it is not a plain number."""

    if isinstance(quantity, bool):
        return None
    if isinstance(quantity, (int, float)):
        value = float(quantity)
        return value if math.isfinite(value) else None
    if isinstance(quantity, str):
        candidate = quantity.strip()
        if _NUMERIC_RE.match(candidate):
            value = float(candidate)
            return value if math.isfinite(value) else None
    return None


def format_number(value: float) -> str:
    """Whole numbers print as integers, everything else with at most two decimals.

    Ties round away from zero on the exact binary value, so 0.125 prints as ``0.13``.
    """

    if float(value).is_integer():
        return str(int(value))
    rounded = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return _TRAILING_ZEROS_RE.sub("", f"{rounded:f}")


def is_count_unit(unit: Optional[str]) -> bool:
    return (unit or "").strip().lower() == COUNT_UNIT


def format_line_quantity(
    quantity: Union[int, float, str, None],
    unit: Optional[str],
    default_unit: Optional[str] = None,
) -> str:
    """Quantity label shown beside a single recipe ingredient (``"200 g"``, ``"3"``)."""

    resolved_unit = unit or default_unit or ""
    hide_unit = is_count_unit(resolved_unit)
    if is_absent(quantity):
        return "" if hide_unit else resolved_unit
    if isinstance(quantity, float) and quantity.is_integer():
        quantity = int(quantity)
    if resolved_unit and not hide_unit:
        return f"{quantity} {resolved_unit}"
    return f"{quantity}"


__all__ = [
    "COUNT_UNIT",
    "format_line_quantity",
    "format_number",
    "is_absent",
    "is_count_unit",
    "parse_numeric",
]
