"""
Fluent Assertions over Groups of Elements

This package provides the assertion engine: wrap a value with
assert_that() and chain checks that either pass silently or raise
an AssertionFailure with a descriptive message.

Supported groups:
    - lists and other sequences: membership, duplicates, sequences, positions
    - sets and other collections: membership, duplicates
    - iterators and generators: drained once, then checked like collections
    - tuples (object arrays): deep equality, element types
    - primitive arrays: exact equality, float equality within a delta
    - mappings: entries

Usage:
    from groupcheck.assertions import assert_that, at_index

    assert_that([1, 2, 3, 4]).as_("ids") \\
        .contains(2, 3) \\
        .does_not_have_duplicates() \\
        .contains_sequence(2, 3) \\
        .contains_at(4, at_index(3))

    assert_that(iter(["a", "b"])).contains_only("b", "a")
"""

# Errors
from ..errors import (
    AssertionFailure,
    ComparisonFailure,
    IndexOutOfRangeError,
    IntrospectionError,
    InvalidArgumentError,
    PreconditionError,
)

# Value objects
from .models import Condition, Delta, Entry, Index, at_index, delta, entry

# Assertions
from .base import GenericAssert
from .groups import GroupAssert, ItemGroupAssert, ObjectGroupAssert
from .lists import ListAssert
from .iterables import CollectionAssert, IteratorAssert
from .arrays import (
    ArrayAssert,
    BoolArrayAssert,
    ByteArrayAssert,
    CharArrayAssert,
    FloatArrayAssert,
    IntArrayAssert,
    ObjectArrayAssert,
)
from .maps import MapAssert

# Entry point
from .factory import assert_that

# Collaborators
from .materializer import ElementMaterializer
from .properties import (
    AttributePathResolver,
    PathResolver,
    get_path_resolver,
    set_path_resolver,
)

__all__ = [
    # Entry point
    "assert_that",
    # Errors
    "AssertionFailure",
    "ComparisonFailure",
    "PreconditionError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "IntrospectionError",
    # Value objects
    "Condition",
    "Delta",
    "Entry",
    "Index",
    "at_index",
    "delta",
    "entry",
    # Assertions
    "GenericAssert",
    "GroupAssert",
    "ItemGroupAssert",
    "ObjectGroupAssert",
    "ListAssert",
    "CollectionAssert",
    "IteratorAssert",
    "ArrayAssert",
    "ObjectArrayAssert",
    "IntArrayAssert",
    "ByteArrayAssert",
    "BoolArrayAssert",
    "CharArrayAssert",
    "FloatArrayAssert",
    "MapAssert",
    # Collaborators
    "ElementMaterializer",
    "PathResolver",
    "AttributePathResolver",
    "get_path_resolver",
    "set_path_resolver",
]
