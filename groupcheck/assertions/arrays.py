"""
Assertions over fixed arrays.

Object arrays (tuples) compare by deep equality. Primitive arrays
(array.array, bytes, or sequences of numbers, booleans or characters)
compare elementwise, and floating-point arrays also within a delta.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..errors import InvalidArgumentError
from .comparison import arrays_close, arrays_equal, deep_equal
from .groups import ItemGroupAssert, ObjectGroupAssert
from .models import Delta


class ObjectArrayAssert(ObjectGroupAssert):
    """Assertion over an array of arbitrary objects."""

    def has_all_elements_of_type(self, expected_type: type) -> ObjectArrayAssert:
        self._require_argument(expected_type, "type")
        if all(isinstance(e, expected_type) for e in self._snapshot()):
            return self
        self._fail("not all elements in array:<{}> belong to the type:<{}>",
                   self._displayed_actual(), expected_type)

    def has_at_least_one_element_of_type(self, expected_type: type) -> ObjectArrayAssert:
        self._require_argument(expected_type, "type")
        if any(isinstance(e, expected_type) for e in self._snapshot()):
            return self
        self._fail("array:<{}> does not have any elements of type:<{}>",
                   self._displayed_actual(), expected_type)

    def is_equal_to(self, expected: Any) -> ObjectArrayAssert:
        """Deep equality: nested arrays are compared element by element."""
        if deep_equal(self.actual, expected):
            return self
        self._fail("expected:<{}> but was:<{}>", expected, self._displayed_actual())

    def is_not_equal_to(self, other: Any) -> ObjectArrayAssert:
        if not deep_equal(self.actual, other):
            return self
        self._fail("actual value:<{}> should not be equal to:<{}>", self._displayed_actual(), other)

    def _new_from(self, values: list[Any]) -> ObjectArrayAssert:
        return ObjectArrayAssert(tuple(values))


class ArrayAssert(ItemGroupAssert):
    """
    Base for primitive arrays.

    Subclasses declare the accepted element types; the array is checked
    against them when the assertion is created.
    """

    element_types: tuple[type, ...] = ()
    element_name: str = "element"

    def __init__(self, actual: Sequence[Any] | None):
        super().__init__(actual)
        if actual is not None:
            self._validate_elements(self._snapshot())

    def _validate_elements(self, elements: Sequence[Any]) -> None:
        for position, element in enumerate(elements):
            if not self._accepts(element):
                raise InvalidArgumentError(
                    f"{type(self).__name__} expects {self.element_name} elements, "
                    f"got {element!r} at index {position}"
                )

    def _accepts(self, element: Any) -> bool:
        return isinstance(element, self.element_types)

    def is_equal_to(self, expected: Sequence[Any] | None) -> ArrayAssert:
        """Exact elementwise equality; arrays of different length are unequal."""
        if arrays_equal(self.actual, expected):
            return self
        self._fail("expected:<{}> but was:<{}>", expected, self._displayed_actual())

    def is_not_equal_to(self, other: Sequence[Any] | None) -> ArrayAssert:
        if not arrays_equal(self.actual, other):
            return self
        self._fail("actual value:<{}> should not be equal to:<{}>", self._displayed_actual(), other)


class IntArrayAssert(ArrayAssert):
    element_types = (int,)
    element_name = "integer"


class ByteArrayAssert(IntArrayAssert):
    element_name = "byte"

    def _accepts(self, element: Any) -> bool:
        return isinstance(element, int) and -128 <= element <= 255


class BoolArrayAssert(ArrayAssert):
    element_types = (bool,)
    element_name = "boolean"


class CharArrayAssert(ArrayAssert):
    element_types = (str,)
    element_name = "character"

    def _accepts(self, element: Any) -> bool:
        return isinstance(element, str) and len(element) == 1


class FloatArrayAssert(ArrayAssert):
    """
    Assertion over an array of floating-point numbers.

    Example:
        FloatArrayAssert([1.0, 2.0]).is_equal_to([1.0001, 2.0], delta=0.001)
    """

    element_types = (float, int)
    element_name = "floating-point"

    def _accepts(self, element: Any) -> bool:
        return isinstance(element, (float, int)) and not isinstance(element, bool)

    def is_equal_to(
        self,
        expected: Sequence[float] | None,
        delta: Delta | float | None = None,
    ) -> FloatArrayAssert:
        """
        Elementwise equality, within delta when one is given.

        Each pair of elements is first compared exactly, so equal
        infinities and NaNs match, then by absolute difference.
        """
        if delta is None:
            return super().is_equal_to(expected)
        tolerance = delta if isinstance(delta, Delta) else Delta(delta)
        if expected is not None:
            for position, element in enumerate(expected):
                if not self._accepts(element):
                    raise InvalidArgumentError(
                        f"Expected values compared within a delta must be numbers, "
                        f"got {element!r} at index {position}"
                    )
        if arrays_close(self.actual, expected, tolerance):
            return self
        self._fail("expected:<{}> but was:<{}> using delta:<{}>",
                   expected, self._displayed_actual(), tolerance.value)
