"""Tests for map assertions."""

import pytest

from groupcheck.assertions import MapAssert, assert_that, entry
from groupcheck.errors import AssertionFailure, PreconditionError


@pytest.fixture
def stock():
    return {"apples": 3, "pears": 0}


class TestIncludes:
    """Tests for MapAssert.includes()."""

    def test_dispatch(self, stock):
        assert isinstance(assert_that(stock), MapAssert)

    def test_entries_present(self, stock):
        assert_that(stock).includes(entry("apples", 3), entry("pears", 0))

    def test_single_missing_entry(self, stock):
        with pytest.raises(AssertionFailure) as exc:
            assert_that(stock).includes(entry("apples", 4))
        assert str(exc.value) == "the map:<{'apples': 3, 'pears': 0}> does not contain the entry:<['apples'=4]>"

    def test_several_missing_entries(self, stock):
        with pytest.raises(AssertionFailure, match="does not contain the entries"):
            assert_that(stock).includes(entry("kiwis", 1), entry("pears", 1))

    def test_absent_entry(self, stock):
        with pytest.raises(PreconditionError):
            assert_that(stock).includes(None)


class TestExcludes:
    """Tests for MapAssert.excludes()."""

    def test_entries_absent(self, stock):
        assert_that(stock).excludes(entry("apples", 4), entry("kiwis", 1))

    def test_entry_present(self, stock):
        with pytest.raises(AssertionFailure) as exc:
            assert_that(stock).excludes(entry("pears", 0))
        assert str(exc.value) == "the map:<{'apples': 3, 'pears': 0}> contains the entry:<['pears'=0]>"

    def test_unhashable_key_is_never_present(self, stock):
        assert_that(stock).excludes(entry([1], 2))
        with pytest.raises(AssertionFailure, match="does not contain the entry"):
            assert_that(stock).includes(entry([1], 2))


class TestMapSize:
    """Group size checks apply to mappings too."""

    def test_size_and_emptiness(self, stock):
        assert_that(stock).has_size(2).is_not_empty()
        assert_that({}).is_empty()

    def test_absent_map(self):
        with pytest.raises(PreconditionError):
            MapAssert(None).includes(entry("a", 1))
