"""Tests for checks shared by every assertion, and for conditions."""

import pytest

from groupcheck.assertions import Condition, GenericAssert, assert_that
from groupcheck.errors import AssertionFailure, ComparisonFailure, PreconditionError
from groupcheck.settings import override_settings


class Positive(Condition):
    def matches(self, value):
        return value > 0


class TestEquality:
    """Tests for is_equal_to() and friends."""

    def test_equal(self):
        assert_that(5).is_equal_to(5)
        assert_that([1, 2]).is_equal_to([1, 2])

    def test_not_equal_raises_comparison_failure(self):
        with pytest.raises(ComparisonFailure) as exc:
            assert_that([1]).as_("ids").is_equal_to([2])
        assert str(exc.value) == "[ids] expected:<[2]> but was:<[1]>"
        assert exc.value.expected == [2]
        assert exc.value.actual == [1]

    def test_rich_failures_can_be_disabled(self):
        with override_settings(rich_comparison_failures=False):
            with pytest.raises(AssertionFailure) as exc:
                assert_that(1).is_equal_to(2)
        assert type(exc.value) is AssertionFailure
        assert str(exc.value) == "expected:<2> but was:<1>"

    def test_override_message_skips_comparison_failure(self):
        with pytest.raises(AssertionFailure) as exc:
            assert_that(1).overriding_error_message("nope").is_equal_to(2)
        assert type(exc.value) is AssertionFailure
        assert str(exc.value) == "nope"

    def test_is_not_equal_to(self):
        assert_that(1).is_not_equal_to(2)
        with pytest.raises(AssertionFailure, match="actual value:<1> should not be equal to:<1>"):
            assert_that(1).is_not_equal_to(1)

    def test_strings_use_generic_assertion(self):
        checks = assert_that("abc")
        assert type(checks) is GenericAssert
        checks.is_equal_to("abc")


class TestIdentity:
    """Tests for is_same_as() / is_not_same_as()."""

    def test_same(self):
        value = [1]
        assert_that(value).is_same_as(value)
        with pytest.raises(AssertionFailure, match="expected same instance but found"):
            assert_that(value).is_same_as([1])

    def test_not_same(self):
        value = [1]
        assert_that(value).is_not_same_as([1])
        with pytest.raises(AssertionFailure, match=r"given objects are same:<\[1\]>"):
            assert_that(value).is_not_same_as(value)


class TestIsIn:
    """Tests for is_in() / is_not_in()."""

    def test_is_in(self):
        assert_that(2).is_in(1, 2, 3)
        with pytest.raises(AssertionFailure) as exc:
            assert_that(4).is_in(1, 2)
        assert str(exc.value) == "actual value:<4> should be in:<[1, 2]>"

    def test_is_in_compares_arrays_by_content(self):
        assert_that(((1, 2), 3)).is_in(((1, 2), 3))
        assert_that(bytearray(b"ab")).is_in(b"ab")

    def test_is_in_does_not_mix_array_families(self):
        with pytest.raises(AssertionFailure):
            assert_that((1, 2)).is_in([1, 2])
        with pytest.raises(AssertionFailure):
            assert_that(b"ab").is_in([97, 98])

    def test_is_in_with_no_values_fails(self):
        with pytest.raises(AssertionFailure):
            assert_that(1).is_in()

    def test_is_not_in(self):
        assert_that(4).is_not_in(1, 2)
        with pytest.raises(AssertionFailure, match=r"should not be in:<\[1, 2\]>"):
            assert_that(1).is_not_in(1, 2)

    def test_is_not_in_with_no_values_fails(self):
        with pytest.raises(AssertionFailure):
            assert_that(1).is_not_in()


class TestConditions:
    """Tests for satisfies(), is_() and their negations."""

    def test_satisfies(self):
        assert_that(3).satisfies(Positive())
        with pytest.raises(AssertionFailure) as exc:
            assert_that(-1).satisfies(Positive())
        assert str(exc.value) == "actual value:<-1> should satisfy condition:<Positive>"

    def test_does_not_satisfy(self):
        assert_that(-1).does_not_satisfy(Positive())
        with pytest.raises(AssertionFailure, match="should not satisfy condition:<Positive>"):
            assert_that(1).does_not_satisfy(Positive())

    def test_is_and_is_not_use_description(self):
        positive = Positive("positive")
        assert_that(1).is_(positive)
        with pytest.raises(AssertionFailure) as exc:
            assert_that(1).is_not(positive)
        assert str(exc.value) == "actual value:<1> should not be:<positive>"

    def test_condition_from_predicate(self):
        even = Condition.of(lambda v: v % 2 == 0, "even")
        assert_that(4).is_(even)
        with pytest.raises(AssertionFailure, match="should be:<even>"):
            assert_that(3).is_(even)

    def test_description_with_braces(self):
        odd_set = Condition.of(lambda v: v in {1, 3}, "in {1, 3}")
        with pytest.raises(AssertionFailure, match=r"should satisfy condition:<in \{1, 3\}>"):
            assert_that(2).satisfies(odd_set)

    def test_absent_condition(self):
        with pytest.raises(PreconditionError):
            assert_that(1).satisfies(None)

    def test_condition_on_group(self):
        non_empty = Condition.of(bool, "non-empty")
        assert_that([1]).satisfies(non_empty)


class TestMisuse:
    """Comparing assertion objects directly is an error."""

    def test_equality_operator_raises(self):
        with pytest.raises(TypeError, match="is_equal_to"):
            assert_that(1) == 1

    def test_described_as_alias(self):
        checks = assert_that([1]).described_as("ids")
        assert checks.description == "ids"
