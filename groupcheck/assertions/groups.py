"""
Assertions over groups of elements.

GroupAssert owns the one-time snapshot of the value under test and the
size checks. ItemGroupAssert adds membership and duplicate checks on
top of it; ObjectGroupAssert adds property extraction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, NoReturn, TypeVar

from .base import GenericAssert
from .inspection import SetView, consume, duplicates_from, found, not_found
from .materializer import ElementMaterializer
from .properties import get_path_resolver

S = TypeVar("S", bound="GroupAssert")


class GroupAssert(GenericAssert):
    """
    Assertion over a finite group of elements.

    The elements are materialized on first use and every later check
    observes the same snapshot, even when the group is a single-pass
    iterator.
    """

    def __init__(self, actual: Iterable[Any] | None):
        super().__init__(actual)
        self._materializer = ElementMaterializer(actual) if actual is not None else None

    def _snapshot(self) -> tuple[Any, ...]:
        self._require_present()
        return self._materializer.snapshot()

    def size(self) -> int:
        """Number of elements in the group (duplicates included)."""
        return len(self._snapshot())

    def to_list(self) -> list[Any]:
        """A copy of the elements, in order."""
        return list(self._snapshot())

    def is_empty(self: S) -> S:
        if self.size() == 0:
            return self
        self._fail("expecting empty, but was:<{}>", self._displayed_actual())

    def is_not_empty(self: S) -> S:
        if self.size() > 0:
            return self
        self._fail("expecting non-empty, but it was empty")

    def has_size(self: S, expected: int) -> S:
        self._require_argument(expected, "size")
        size = self.size()
        if size == expected:
            return self
        self._fail("expected size:<{}> but was:<{}> for <{}>", expected, size, self._displayed_actual())

    def is_none_or_empty(self: S) -> S:
        if self.actual is None or self.size() == 0:
            return self
        self._fail("expecting None or empty, but was:<{}>", self._displayed_actual())


class ItemGroupAssert(GroupAssert):
    """Membership and duplicate checks over the group's elements."""

    def _set_view(self) -> SetView:
        return SetView(self._snapshot())

    def contains(self: S, *values: Any) -> S:
        """
        Passes if every value is present in the group.

        Multiplicity is ignored: one occurrence satisfies any number of
        equal expected values.
        """
        self._require_present()
        missing = not_found(self._set_view(), values)
        if not missing:
            return self
        self._fail_missing(missing)

    def contains_only(self: S, *values: Any) -> S:
        """
        Passes if the group's distinct elements are exactly the values.

        The check is set-based: repeated elements in the group are
        accepted as long as their value was requested. Use
        does_not_have_duplicates() to reject repetitions.
        """
        self._require_present()
        remaining = self._set_view()
        missing = consume(remaining, SetView(values))
        if missing:
            self._fail_missing(missing)
        if not remaining:
            return self
        self._fail("unexpected element(s):<{}> in <{}>", remaining.to_list(), self._displayed_actual())

    def excludes(self: S, *values: Any) -> S:
        """Passes if none of the values is present in the group."""
        self._require_present()
        present = found(self._set_view(), values)
        if not present:
            return self
        self._fail("<{}> does not exclude element(s):<{}>", self._displayed_actual(), present)

    def does_not_have_duplicates(self: S) -> S:
        duplicates = duplicates_from(self._snapshot())
        if not duplicates:
            return self
        self._fail("<{}> contains duplicate(s):<{}>", self._displayed_actual(), duplicates)

    def _fail_missing(self, missing: list[Any]) -> NoReturn:
        self._fail("<{}> does not contain element(s):<{}>", self._displayed_actual(), missing)


class ObjectGroupAssert(ItemGroupAssert, ABC):
    """
    Group of arbitrary objects, supporting property extraction.

    Subclasses implement _new_from() so that on_property() returns an
    assertion of the same kind over the extracted values.
    """

    def on_property(self: S, path: str) -> S:
        """
        New assertion over the value of a property of each element.

        Args:
            path: Dotted attribute path ("father.age") or a JSONPath
                expression ("$.father.age") for mapping elements

        Raises:
            IntrospectionError: If an element lacks the property
        """
        self._require_argument(path, "property path")
        elements = self._snapshot()
        values = get_path_resolver().values_of(path, elements) if elements else []
        return self._new_from(values)

    @abstractmethod
    def _new_from(self, values: list[Any]) -> ObjectGroupAssert:
        """Build an assertion of this kind over extracted values."""
