"""Canonical decimal rendering of evaluation results."""

from __future__ import annotations

import math

# Integral doubles at or above this magnitude are no longer exact integers
_EXACT_INTEGER_LIMIT = 1e16


def format_result(value: float, precision: int | None = None) -> str:
    """Render a result as its canonical decimal string.

    Integral values drop the fractional part ("120", not "120.0"); everything
    else uses the shortest string that round-trips to the same double. With
    ``precision``, the value is first rounded to that many significant digits.

    Examples:
        format_result(14.0)              # "14"
        format_result(0.1 + 0.2)         # "0.30000000000000004"
        format_result(0.1 + 0.2, 12)     # "0.3"
        format_result(float("inf"))      # "Infinity"
    """
    if math.isnan(value):
        raise ValueError("NaN is not a valid result")

    # Rounding can carry a finite value past the largest double
    if precision is not None and math.isfinite(value):
        value = float(f"{value:.{precision}g}")

    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < _EXACT_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)
