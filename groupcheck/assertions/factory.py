"""
Entry point choosing the assertion class for a value.
"""

from __future__ import annotations

from array import array
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from .arrays import (
    ByteArrayAssert,
    CharArrayAssert,
    FloatArrayAssert,
    IntArrayAssert,
    ObjectArrayAssert,
)
from .base import GenericAssert
from .iterables import CollectionAssert, IteratorAssert
from .lists import ListAssert
from .maps import MapAssert

FLOAT_TYPECODES = {"f", "d"}
CHAR_TYPECODES = {"u", "w"}


def assert_that(actual: Any) -> GenericAssert:
    """
    Create the assertion matching the shape of a value.

    Args:
        actual: The value under test

    Returns:
        - MapAssert for mappings
        - FloatArrayAssert / CharArrayAssert / IntArrayAssert for array.array
        - ByteArrayAssert for bytes and bytearray
        - ObjectArrayAssert for tuples
        - ListAssert for other sequences (and for None)
        - IteratorAssert for iterators and generators
        - CollectionAssert for any other iterable (sets, views, ...)
        - GenericAssert for everything else, including strings

    Example:
        assert_that([1, 2, 3]).contains(2).does_not_have_duplicates()
        assert_that(array("d", [1.0, 2.0])).is_equal_to([1.0001, 2.0], delta=0.001)
    """
    if actual is None:
        return ListAssert(None)

    if isinstance(actual, str):
        return GenericAssert(actual)

    if isinstance(actual, (bytes, bytearray)):
        return ByteArrayAssert(actual)

    if isinstance(actual, Mapping):
        return MapAssert(actual)

    if isinstance(actual, array):
        if actual.typecode in FLOAT_TYPECODES:
            return FloatArrayAssert(actual)
        if actual.typecode in CHAR_TYPECODES:
            return CharArrayAssert(actual)
        return IntArrayAssert(actual)

    if isinstance(actual, tuple):
        return ObjectArrayAssert(actual)

    if isinstance(actual, Sequence):
        return ListAssert(actual)

    if isinstance(actual, Iterator):
        return IteratorAssert(actual)

    if isinstance(actual, Iterable):
        return CollectionAssert(actual)

    return GenericAssert(actual)
