"""
Reporting for Suite Runs

This package provides reporting capabilities for capturing complete
records of check suite runs.

Features:
    - Run metadata (ID, timestamp, suite hash)
    - Check-by-check records with timing
    - Failure and error messages
    - JSON serialization
    - Human-readable summaries

Usage:
    from groupcheck.suites import load_suite
    from groupcheck.reporting import Reporter

    suite, _ = load_suite("inventory.yaml")
    reporter = Reporter.from_suite(suite)

    reporter.start_run()
    reporter.start_check("unique-skus")
    reporter.complete_check_failure(
        "unique-skus",
        failure_message="<['a', 'a']> contains duplicate(s):<['a']>",
    )

    report = reporter.finish_run()
    print(report.summary())
    reporter.save_json("reports/run.json")
"""

# Models
from .models import (
    CheckRecord,
    CheckStatus,
    RunReport,
    RunStatus,
    compute_suite_hash,
)

# Reporter
from .reporter import Reporter

__all__ = [
    # Models
    "RunReport",
    "RunStatus",
    "CheckRecord",
    "CheckStatus",
    "compute_suite_hash",
    # Reporter
    "Reporter",
]
