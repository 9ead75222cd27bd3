"""Formatting helpers for calculation output.

Costs are shown the way the calculator's users read rupiah amounts:
whole rupiah, ``.`` as the thousands separator (``Rp 350.000.000``).
Areas are fixed to two decimals.
"""

from __future__ import annotations

import math


def round_half_up(amount: float) -> int:
    """Round to the nearest whole unit, halves away from zero."""
    if amount < 0:
        return -math.floor(-amount + 0.5)
    return math.floor(amount + 0.5)


def format_rupiah(amount: float) -> str:
    """Format an amount as grouped whole rupiah, e.g. ``Rp 1.234.567``."""
    rounded = round_half_up(amount)
    grouped = f"{abs(rounded):,}".replace(",", ".")
    sign = "-" if rounded < 0 else ""
    return f"{sign}Rp {grouped}"


def format_area(area: float) -> str:
    """Format an area in m² to two decimal places."""
    return f"{area:.2f}"


def format_dimensions(length: float, width: float) -> str:
    """Format a recommended room size as ``'L x W m'``."""
    return f"{length:g} x {width:g} m"
