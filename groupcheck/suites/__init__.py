"""
Check Suites

This package provides tools for loading, validating and running YAML
check suites: named groups of elements plus the checks to apply to them.

Usage:
    from groupcheck.suites import load_suite, run_suite

    # Load from file
    suite, result = load_suite("checks/inventory.yaml")
    if not result.is_valid:
        print(result)

    # Or validate from string
    suite, result = validate_suite_yaml(yaml_string)

    reporter = run_suite(suite)
    print(reporter.get_summary())
"""

# Public API
from .loader import load_suite, validate_suite_yaml
from .runner import apply_check, build_assertion, run_suite

# Models (for type hints and isinstance checks)
from .models import (
    Check,
    CheckOp,
    GroupKind,
    GroupSpec,
    Suite,
)

# Validation (for custom validation if needed)
from .validation import SchemaValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_suite",
    "validate_suite_yaml",
    # Runner
    "run_suite",
    "build_assertion",
    "apply_check",
    # Models
    "Suite",
    "GroupSpec",
    "Check",
    "GroupKind",
    "CheckOp",
    # Validation
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
]
