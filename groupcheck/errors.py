"""
Exception hierarchy for groupcheck.

Three kinds of error are kept apart so a test suite can tell a failed
expectation from a misuse of the API:

    AssertionFailure(AssertionError)          -- an expectation did not hold
        ComparisonFailure(AssertionFailure)   -- equality check, with expected/actual
        PreconditionError(AssertionFailure)   -- group or argument absent
    InvalidArgumentError(ValueError)          -- invalid delta, index, setting
        IndexOutOfRangeError(..., IndexError) -- index outside [0, size)
    IntrospectionError(AttributeError)        -- property path not resolvable
"""

from __future__ import annotations

from typing import Any


class AssertionFailure(AssertionError):
    """An assertion did not hold. The message is ready for display."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ComparisonFailure(AssertionFailure):
    """
    Failure of an equality check that keeps both sides of the comparison.

    Attributes:
        expected: The value the actual value was compared against
        actual: The value under test
    """

    def __init__(self, message: str, expected: Any, actual: Any):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class PreconditionError(AssertionFailure):
    """The value under test, or a required argument, is absent."""


class InvalidArgumentError(ValueError):
    """An argument passed to the API is invalid (not a failed expectation)."""


class IndexOutOfRangeError(InvalidArgumentError, IndexError):
    """An index argument lies outside the group's valid positions."""


class IntrospectionError(AttributeError):
    """A property path could not be resolved on an element."""

    def __init__(self, message: str, path: str | None = None, element: Any = None):
        super().__init__(message)
        self.path = path
        self.element = element
