"""
Value objects passed to assertions.

This module defines the small argument types used by the assertion
classes: tolerances, indices, conditions and map entries.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from ..errors import InvalidArgumentError


@dataclass(frozen=True)
class Delta:
    """Non-negative tolerance for floating-point array comparison."""
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise InvalidArgumentError(f"The delta should be a number, got {self.value!r}")
        if math.isnan(self.value) or self.value < 0:
            raise InvalidArgumentError(f"The delta should not be negative, got {self.value!r}")

    def __str__(self) -> str:
        return str(float(self.value))


def delta(value: float) -> Delta:
    """Create a Delta."""
    return Delta(value)


@dataclass(frozen=True)
class Index:
    """Position of an element in a list-like group."""
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidArgumentError(f"The index should be an integer, got {self.value!r}")


def at_index(value: int) -> Index:
    """Create an Index."""
    return Index(value)


@dataclass(frozen=True)
class Entry:
    """A key/value pair expected (or forbidden) in a mapping."""
    key: Any
    value: Any

    def __str__(self) -> str:
        return f"{self.key!r}={self.value!r}"

    __repr__ = __str__


def entry(key: Any, value: Any) -> Entry:
    """Create an Entry."""
    return Entry(key, value)


class Condition(ABC):
    """
    A named predicate a value may satisfy.

    Subclasses implement matches(). The description, when set, is shown
    in failure messages; otherwise the class name is used.
    """

    def __init__(self, description: str | None = None):
        self._description = description

    def as_(self, description: str | None) -> Condition:
        self._description = description
        return self

    @property
    def description(self) -> str | None:
        return self._description

    @abstractmethod
    def matches(self, value: Any) -> bool:
        """Return True if the value satisfies the condition."""
        ...

    @property
    def label(self) -> str:
        """The description, or the class name when none was given."""
        return self._description or type(self).__name__

    @classmethod
    def of(cls, predicate: Callable[[Any], bool], description: str | None = None) -> Condition:
        """Build a condition from a plain predicate."""
        return _PredicateCondition(predicate, description)


class _PredicateCondition(Condition):

    def __init__(self, predicate: Callable[[Any], bool], description: str | None):
        name = getattr(predicate, "__name__", None)
        if name == "<lambda>":
            name = None
        super().__init__(description or name)
        self._predicate = predicate

    def matches(self, value: Any) -> bool:
        return bool(self._predicate(value))
