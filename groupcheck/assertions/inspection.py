"""
Membership and duplicate reasoning over snapshots.

Hashable elements are looked up through a dict index. Elements need
not be hashable though: unhashable ones are kept aside and found by a
linear scan with Python's container semantics (identity, then equality).
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator


_REMOVED = object()


def _is_hashable(element: Any) -> bool:
    try:
        hash(element)
    except TypeError:
        return False
    return True


class SetView:
    """
    De-duplicated, insertion-ordered view of a snapshot.

    Built fresh for every membership check; remove() lets a caller
    consume the view while matching expected values.
    """

    def __init__(self, elements: Iterable[Any] = ()):
        self._slots: list[Any] = []
        self._index: dict[Any, int] = {}
        self._unhashable: list[int] = []
        self._size = 0
        for element in elements:
            self.add(element)

    def _find(self, element: Any) -> int | None:
        if _is_hashable(element):
            return self._index.get(element)
        for slot in self._unhashable:
            candidate = self._slots[slot]
            if candidate is element or candidate == element:
                return slot
        return None

    def add(self, element: Any) -> None:
        if self._find(element) is not None:
            return
        slot = len(self._slots)
        self._slots.append(element)
        if _is_hashable(element):
            self._index[element] = slot
        else:
            self._unhashable.append(slot)
        self._size += 1

    def remove(self, element: Any) -> None:
        slot = self._find(element)
        if slot is None:
            raise ValueError(f"{element!r} not in view")
        if _is_hashable(element):
            del self._index[element]
        else:
            self._unhashable.remove(slot)
        self._slots[slot] = _REMOVED
        self._size -= 1

    def __contains__(self, element: Any) -> bool:
        return self._find(element) is not None

    def __iter__(self) -> Iterator[Any]:
        return (e for e in self._slots if e is not _REMOVED)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def to_list(self) -> list[Any]:
        return list(self)

    def __repr__(self) -> str:
        return f"SetView({self.to_list()!r})"


def not_found(view: SetView, values: Iterable[Any]) -> list[Any]:
    """Values absent from the view, in the order given."""
    return [v for v in values if v not in view]


def found(view: SetView, values: Iterable[Any]) -> list[Any]:
    """Values present in the view, in the order given."""
    return [v for v in values if v in view]


def consume(view: SetView, values: Iterable[Any]) -> list[Any]:
    """
    Remove each value from the view, collecting those that are missing.

    What remains in the view afterwards are the unexpected elements.
    """
    missing = []
    for value in values:
        if value in view:
            view.remove(value)
        else:
            missing.append(value)
    return missing


def duplicates_from(elements: Iterable[Any]) -> list[Any]:
    """
    Values occurring more than once, each reported once.

    Order follows the first occurrence of each value.
    """
    seen = SetView()
    repeated = SetView()
    for element in elements:
        if element in seen:
            repeated.add(element)
        else:
            seen.add(element)
    return [value for value in seen if value in repeated]
