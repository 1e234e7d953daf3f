"""
Elementwise array comparison.

Three comparison modes:
    - exact equality for primitive arrays (NaN equals NaN)
    - tolerance equality for floating-point arrays
    - deep equality for object arrays (nested arrays compared by content)
"""

from __future__ import annotations

import math
from array import array
from typing import Any, Sequence

from .models import Delta

PRIMITIVE_ARRAY_TYPES = (array, bytes, bytearray)


def _elements_equal(a: Any, b: Any) -> bool:
    if a == b:
        return True
    return (
        isinstance(a, float) and isinstance(b, float)
        and math.isnan(a) and math.isnan(b)
    )


def arrays_equal(actual: Sequence[Any] | None, expected: Sequence[Any] | None) -> bool:
    """Exact elementwise equality of two primitive arrays."""
    if actual is None or expected is None:
        return actual is None and expected is None
    if len(actual) != len(expected):
        return False
    return all(_elements_equal(a, e) for a, e in zip(actual, expected))


def within_delta(expected: float, actual: float, tolerance: Delta) -> bool:
    """Exact match first (covers infinities and NaN), then |e - a| <= delta."""
    if _elements_equal(expected, actual):
        return True
    return abs(expected - actual) <= tolerance.value


def arrays_close(
    actual: Sequence[float] | None,
    expected: Sequence[float] | None,
    tolerance: Delta,
) -> bool:
    """Elementwise equality of two floating-point arrays within a tolerance."""
    if actual is expected:
        return True
    if actual is None or expected is None:
        return False
    if len(actual) != len(expected):
        return False
    return all(within_delta(e, a, tolerance) for a, e in zip(actual, expected))


def _same_array_family(a: Any, b: Any) -> bool:
    if isinstance(a, tuple) and isinstance(b, tuple):
        return True
    return isinstance(a, PRIMITIVE_ARRAY_TYPES) and isinstance(b, PRIMITIVE_ARRAY_TYPES)


def deep_equal(a: Any, b: Any) -> bool:
    """
    Recursive equality that descends into nested arrays.

    Only arrays of the same family are compared element by element:
    tuples with tuples, primitive arrays with primitive arrays. A list
    is a collection, not an array, so it never equals a tuple.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    if _same_array_family(a, b):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    return a == b
