"""
Base class shared by every assertion.

GenericAssert holds the value under test together with the optional
description and override message, and implements the checks that apply
to any value: absence, equality, identity, membership and conditions.
"""

from __future__ import annotations

from typing import Any, Generic, NoReturn, TypeVar

from ..errors import PreconditionError
from .comparison import deep_equal
from .formatting import comparison_failure, fail, format_message
from .models import Condition

T = TypeVar("T")
S = TypeVar("S", bound="GenericAssert")


class GenericAssert(Generic[T]):
    """
    Fluent assertion over a single value.

    Every check returns the assertion itself so calls can be chained:

        assert_that(value).as_("user ids").is_not_none().is_in(a, b)
    """

    def __init__(self, actual: T | None):
        self.actual = actual
        self._description: str | None = None
        self._error_message: str | None = None

    # ─────────────────────────────────────────────────────────────────
    # Description and override message
    # ─────────────────────────────────────────────────────────────────

    @property
    def description(self) -> str | None:
        return self._description

    def as_(self: S, description: str | None) -> S:
        """Label the value under test; the label prefixes failure messages."""
        self._description = description
        return self

    def described_as(self: S, description: str | None) -> S:
        return self.as_(description)

    def overriding_error_message(self: S, message: str | None) -> S:
        """Replace the default message of any later failure with this one."""
        self._error_message = message
        return self

    # ─────────────────────────────────────────────────────────────────
    # Failure helpers
    # ─────────────────────────────────────────────────────────────────

    def _fail(self, template: str, *values: Any) -> NoReturn:
        fail(template, *values, description=self._description, override=self._error_message)

    def _fail_not_equal(self, expected: Any) -> NoReturn:
        if self._error_message is None:
            failure = comparison_failure(self._description, expected, self._displayed_actual())
            if failure is not None:
                raise failure
        self._fail("expected:<{}> but was:<{}>", expected, self._displayed_actual())

    def _displayed_actual(self) -> Any:
        """The value shown in failure messages."""
        return self.actual

    def _require_present(self) -> None:
        if self.actual is None:
            raise PreconditionError(
                format_message(self._description, "expecting actual value not to be None")
            )

    @staticmethod
    def _require_argument(value: Any, name: str) -> None:
        if value is None:
            raise PreconditionError(f"The given {name} should not be None")

    # ─────────────────────────────────────────────────────────────────
    # Checks
    # ─────────────────────────────────────────────────────────────────

    def is_none(self: S) -> S:
        if self.actual is None:
            return self
        self._fail("{} should be None", self._displayed_actual())

    def is_not_none(self: S) -> S:
        self._require_present()
        return self

    def is_equal_to(self: S, expected: Any) -> S:
        if self.actual == expected:
            return self
        self._fail_not_equal(expected)

    def is_not_equal_to(self: S, other: Any) -> S:
        if self.actual != other:
            return self
        self._fail("actual value:<{}> should not be equal to:<{}>", self._displayed_actual(), other)

    def is_same_as(self: S, expected: Any) -> S:
        if self.actual is expected:
            return self
        self._fail("expected same instance but found:<{}> and:<{}>", self._displayed_actual(), expected)

    def is_not_same_as(self: S, other: Any) -> S:
        if self.actual is not other:
            return self
        self._fail("given objects are same:<{}>", self._displayed_actual())

    def is_in(self: S, *values: Any) -> S:
        """Passes if the actual value equals one of the values (by content for arrays)."""
        if any(deep_equal(self.actual, v) for v in values):
            return self
        self._fail("actual value:<{}> should be in:<{}>", self._displayed_actual(), list(values))

    def is_not_in(self: S, *values: Any) -> S:
        """Fails if the actual value equals one of the values; never passes for no values."""
        if values and not any(deep_equal(self.actual, v) for v in values):
            return self
        self._fail("actual value:<{}> should not be in:<{}>", self._displayed_actual(), list(values))

    def satisfies(self: S, condition: Condition) -> S:
        if self._matches(condition):
            return self
        self._fail_condition("should satisfy condition", condition)

    def does_not_satisfy(self: S, condition: Condition) -> S:
        if not self._matches(condition):
            return self
        self._fail_condition("should not satisfy condition", condition)

    def is_(self: S, condition: Condition) -> S:
        if self._matches(condition):
            return self
        self._fail_condition("should be", condition)

    def is_not(self: S, condition: Condition) -> S:
        if not self._matches(condition):
            return self
        self._fail_condition("should not be", condition)

    def _matches(self, condition: Condition) -> bool:
        if condition is None:
            raise PreconditionError("Condition to check should not be None")
        return condition.matches(self.actual)

    def _fail_condition(self, reason: str, condition: Condition) -> NoReturn:
        label = condition.label.replace("{", "{{").replace("}", "}}")
        self._fail(f"actual value:<{{}}> {reason}:<{label}>", self._displayed_actual())

    def __eq__(self, other: object) -> bool:
        raise TypeError("'==' is not supported on assertions...maybe you intended to call 'is_equal_to'")

    def __hash__(self) -> int:
        return 1
