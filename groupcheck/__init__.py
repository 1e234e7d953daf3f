"""
groupcheck - Fluent Assertions over Groups of Elements

This package provides a fluent assertion engine for finite groups of
elements, plus declarative YAML check suites run through the same engine.

Subpackages:
    - assertions: assert_that() and the assertion classes
    - suites: Load, validate and run YAML check suites
    - reporting: Run reports and result tracking

Usage:
    from groupcheck import assert_that, delta

    assert_that(["a", "b", "c"]).contains("b").does_not_have_duplicates()
    assert_that(array("d", [1.0, 2.0])).is_equal_to([1.0001, 2.0], delta(0.001))

    suite, result = load_suite("checks/inventory.yaml")
    reporter = run_suite(suite)
    print(reporter.get_summary())
"""

__version__ = "0.1.0"

# Re-export errors for convenience
from .errors import (
    AssertionFailure,
    ComparisonFailure,
    IndexOutOfRangeError,
    IntrospectionError,
    InvalidArgumentError,
    PreconditionError,
)

# Re-export settings for convenience
from .settings import (
    Settings,
    configure,
    get_settings,
    override_settings,
    reset_settings,
)

# Re-export assertions for convenience
from .assertions import (
    # Entry point
    assert_that,
    # Value objects
    Condition,
    Delta,
    Entry,
    Index,
    at_index,
    delta,
    entry,
)

# Re-export suites for convenience
from .suites import (
    load_suite,
    validate_suite_yaml,
    run_suite,
    Suite,
    ValidationResult,
)

# Re-export reporting for convenience
from .reporting import (
    Reporter,
    RunReport,
    RunStatus,
)

__all__ = [
    # Package info
    "__version__",
    # Errors
    "AssertionFailure",
    "ComparisonFailure",
    "PreconditionError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "IntrospectionError",
    # Settings
    "Settings",
    "configure",
    "get_settings",
    "override_settings",
    "reset_settings",
    # Assertions
    "assert_that",
    "Condition",
    "Delta",
    "Entry",
    "Index",
    "at_index",
    "delta",
    "entry",
    # Suites
    "load_suite",
    "validate_suite_yaml",
    "run_suite",
    "Suite",
    "ValidationResult",
    # Reporting
    "Reporter",
    "RunReport",
    "RunStatus",
]
