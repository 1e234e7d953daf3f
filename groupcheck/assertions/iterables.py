"""
Assertions over unordered collections and single-pass iterators.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .groups import ObjectGroupAssert


class CollectionAssert(ObjectGroupAssert):
    """Assertion over a collection (set, frozenset, or any sized container)."""

    def _new_from(self, values: list[Any]) -> CollectionAssert:
        return CollectionAssert(values)


class IteratorAssert(ObjectGroupAssert):
    """
    Assertion over a single-pass iterator.

    The iterator is drained once, on the first check that needs its
    elements; later checks and failure messages use that snapshot.

    Example:
        rows = (r for r in fetch())
        checks = assert_that(rows)
        checks.size()           # drains the generator
        checks.contains(first)  # reuses the same elements
    """

    def _displayed_actual(self) -> Any:
        if self.actual is None:
            return None
        return list(self._materializer.snapshot())

    def is_equal_to(self, expected: Any) -> IteratorAssert:
        """Compare the iterator's elements with an iterable of expected values."""
        if self.actual is None or not isinstance(expected, Iterable):
            return super().is_equal_to(expected)
        expected_elements = list(expected)
        if list(self._snapshot()) == expected_elements:
            return self
        self._fail_not_equal(expected_elements)

    def _new_from(self, values: list[Any]) -> IteratorAssert:
        return IteratorAssert(iter(values))
