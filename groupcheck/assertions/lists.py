"""
Assertions over list-like groups, where element order is meaningful.

Besides the membership checks, lists support positional checks:
contains_at, contains_sequence, starts_with, ends_with and
contains_exactly.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..errors import IndexOutOfRangeError
from .formatting import format_message
from .groups import ObjectGroupAssert
from .models import Index


def _same(a: Any, b: Any) -> bool:
    return a is b or a == b


def index_of(elements: Sequence[Any], value: Any) -> int:
    """Position of the first element equal to value, or -1."""
    for position, element in enumerate(elements):
        if _same(element, value):
            return position
    return -1


def matches_at(elements: Sequence[Any], start: int, sequence: Sequence[Any]) -> bool:
    """True if sequence appears contiguously in elements from start."""
    if start < 0 or start + len(sequence) > len(elements):
        return False
    return all(
        _same(elements[start + offset], expected)
        for offset, expected in enumerate(sequence)
    )


class ListAssert(ObjectGroupAssert):
    """
    Assertion over an ordered list.

    Example:
        assert_that([1, 2, 3, 4]).starts_with(1, 2).contains_sequence(2, 3)
    """

    def contains_at(self, value: Any, index: Index | int) -> ListAssert:
        """
        Passes if the element at index equals value.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size)
        """
        self._require_argument(index, "index")
        position = index.value if isinstance(index, Index) else Index(index).value
        elements = self._snapshot()
        if not 0 <= position < len(elements):
            raise IndexOutOfRangeError(format_message(
                self._description,
                "The index <{}> should be greater than or equal to zero and less than {}",
                position, len(elements),
            ))
        actual_element = elements[position]
        if actual_element == value:
            return self
        self._fail("expecting <{}> at index <{}> but found <{}>", value, position, actual_element)

    def contains_sequence(self, *sequence: Any) -> ListAssert:
        """
        Passes if the values appear contiguously in the list.

        Only the first occurrence of the first value is tried: when the
        list is [1, 2, 9, 2, 3], the sequence (2, 3) is not found.
        """
        elements = self._snapshot()
        if not sequence:
            return self
        start = index_of(elements, sequence[0])
        if start != -1 and matches_at(elements, start, sequence):
            return self
        self._fail("list:<{}> does not contain the sequence:<{}>", self._displayed_actual(), list(sequence))

    def starts_with(self, *sequence: Any) -> ListAssert:
        """Passes if the list begins with the values; an empty sequence only matches an empty list."""
        elements = self._snapshot()
        if not sequence and not elements:
            return self
        if sequence and matches_at(elements, 0, sequence):
            return self
        self._fail("list:<{}> does not start with the sequence:<{}>", self._displayed_actual(), list(sequence))

    def ends_with(self, *sequence: Any) -> ListAssert:
        """Passes if the list ends with the values; an empty sequence only matches an empty list."""
        elements = self._snapshot()
        if not sequence and not elements:
            return self
        if sequence and matches_at(elements, len(elements) - len(sequence), sequence):
            return self
        self._fail("list:<{}> does not end with the sequence:<{}>", self._displayed_actual(), list(sequence))

    def contains_exactly(self, *values: Any) -> ListAssert:
        """Passes if the list holds exactly the values, in order."""
        expected = list(values)
        if list(self._snapshot()) == expected:
            return self
        self._fail_not_equal(expected)

    def _new_from(self, values: list[Any]) -> ListAssert:
        return ListAssert(values)
