"""
Typed data structures for check suites.

This module contains all enums and dataclasses that represent
the internal typed structure of a parsed suite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class GroupKind(str, Enum):
    """Shape a group is presented to the assertion engine as."""
    LIST = "list"
    SET = "set"
    ITERATOR = "iterator"  # Fresh single-pass iterator per check
    ARRAY = "array"  # Object array (tuple)
    INT_ARRAY = "int_array"
    FLOAT_ARRAY = "float_array"
    BOOL_ARRAY = "bool_array"
    CHAR_ARRAY = "char_array"


class CheckOp(str, Enum):
    """Supported check operations."""
    CONTAINS = "contains"
    CONTAINS_ONLY = "contains_only"
    EXCLUDES = "excludes"
    DOES_NOT_HAVE_DUPLICATES = "does_not_have_duplicates"
    CONTAINS_SEQUENCE = "contains_sequence"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    CONTAINS_AT = "contains_at"
    IS_EQUAL_TO = "is_equal_to"
    IS_NOT_EQUAL_TO = "is_not_equal_to"
    HAS_SIZE = "has_size"
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"
    IS_NONE = "is_none"
    IS_NOT_NONE = "is_not_none"


# Ops whose 'value' is a list of values spread over the call
MULTI_VALUE_OPS = {
    CheckOp.CONTAINS,
    CheckOp.CONTAINS_ONLY,
    CheckOp.EXCLUDES,
    CheckOp.CONTAINS_SEQUENCE,
    CheckOp.STARTS_WITH,
    CheckOp.ENDS_WITH,
}

# Ops that take no 'value'
NO_VALUE_OPS = {
    CheckOp.DOES_NOT_HAVE_DUPLICATES,
    CheckOp.IS_EMPTY,
    CheckOp.IS_NOT_EMPTY,
    CheckOp.IS_NONE,
    CheckOp.IS_NOT_NONE,
}

# Ops that only make sense on ordered groups
SEQUENCE_OPS = {
    CheckOp.CONTAINS_SEQUENCE,
    CheckOp.STARTS_WITH,
    CheckOp.ENDS_WITH,
    CheckOp.CONTAINS_AT,
}


# ─────────────────────────────────────────────────────────────────────────────
# Groups & Checks
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class GroupSpec:
    """A named group of elements under test."""
    name: str
    kind: GroupKind = GroupKind.LIST
    values: list[Any] | None = None  # None means the group is absent


@dataclass
class Check:
    """A single check on a group."""
    id: str
    group: str
    op: CheckOp
    value: Any = None
    index: int | None = None  # contains_at only
    delta: float | None = None  # is_equal_to on float arrays only
    property: str | None = None  # Extract this property before checking
    description: str | None = None
    message: str | None = None  # Replaces the default failure message


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Suite:
    """Fully parsed and validated check suite."""
    version: int
    name: str
    settings: dict[str, Any] = field(default_factory=dict)
    groups: dict[str, GroupSpec] = field(default_factory=dict)
    checks: list[Check] = field(default_factory=list)
