"""
Checked numeric conversions.

Parameters may be integers or floats; densities are always floats. Every
conversion fails loudly instead of truncating.
"""
from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

from .exceptions import ConversionError


def to_float(value: Any) -> float:
    """Convert a parameter value to a finite float."""
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ConversionError(f"`{value!r}` is not convertible to float: {e}") from e
    if not math.isfinite(result):
        raise ConversionError(f"`{value!r}` is not a finite float")
    return result


def to_int(value: Any) -> int:
    """Convert an integral value to `int`, rejecting anything with a fractional part."""
    if isinstance(value, bool):
        raise ConversionError(f"`{value!r}` is a boolean, not an integer")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        f = to_float(value)
        if not f.is_integer():
            raise ConversionError(f"`{value!r}` has a fractional part")
        return int(f)
    raise ConversionError(f"`{value!r}` is not convertible to int")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    f = to_float(value)
    return int(math.floor(f + 0.5)) if f >= 0 else -int(math.floor(-f + 0.5))


def is_integral_type(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)
