"""
Assertions over mappings.
"""

from __future__ import annotations

from typing import Any

from .groups import GroupAssert
from .models import Entry


class MapAssert(GroupAssert):
    """
    Assertion over a mapping; the group's elements are its keys.

    Example:
        assert_that({"a": 1}).includes(entry("a", 1)).excludes(entry("b", 2))
    """

    def includes(self, *entries: Entry) -> MapAssert:
        """Passes if every entry's key maps to the entry's value."""
        self._require_present()
        missing = [e for e in entries if not self._contains_entry(e)]
        if not missing:
            return self
        self._fail("the map:<{}> does not contain the " + _entry_or_entries(missing) + ":<{}>",
                   self.actual, missing)

    def excludes(self, *entries: Entry) -> MapAssert:
        """Passes if no entry's key maps to the entry's value."""
        self._require_present()
        present = [e for e in entries if self._contains_entry(e)]
        if not present:
            return self
        self._fail("the map:<{}> contains the " + _entry_or_entries(present) + ":<{}>",
                   self.actual, present)

    def _contains_entry(self, item: Entry) -> bool:
        self._require_argument(item, "entry")
        try:
            if item.key not in self.actual:
                return False
        except TypeError:
            # Unhashable keys cannot be stored in a dict
            return False
        return self.actual[item.key] == item.value


def _entry_or_entries(entries: list[Entry]) -> str:
    return "entry" if len(entries) == 1 else "entries"
