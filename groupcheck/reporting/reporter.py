"""
Reporter for building and managing run reports.

This module provides the Reporter class which helps construct
run reports from suite executions.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from .models import (
    CheckRecord,
    CheckStatus,
    RunReport,
    compute_suite_hash,
)

if TYPE_CHECKING:
    from ..suites import Suite


class Reporter:
    """
    Builds and manages run reports.

    Example:
        suite, _ = load_suite("inventory.yaml")
        reporter = Reporter.from_suite(suite)

        reporter.start_run()
        reporter.start_check("unique-skus")
        reporter.complete_check_success("unique-skus")
        reporter.start_check("weights-close")
        reporter.complete_check_failure("weights-close", "expected:<[1.0]> but was:<[1.5]>")

        report = reporter.finish_run()
        print(report.summary())
    """

    def __init__(self, report: RunReport):
        """
        Initialize with a RunReport.

        Use Reporter.from_suite() for the typical case.
        """
        self.report = report

    @classmethod
    def from_suite(cls, suite: Suite, run_id: str | None = None) -> Reporter:
        """
        Create a Reporter from a parsed Suite.

        Args:
            suite: The parsed suite to create a report for
            run_id: Optional custom run ID (auto-generated if not provided)

        Returns:
            Reporter instance ready to record check results
        """
        report = RunReport(
            suite_name=suite.name,
            suite_version=suite.version,
            suite_hash=compute_suite_hash(_suite_to_dict(suite)),
        )

        if run_id:
            report.run_id = run_id

        # Pre-populate check records from suite checks
        for check in suite.checks:
            report.add_check(CheckRecord(
                check_id=check.id,
                group=check.group,
                op=check.op.value,
                expected_value=check.value,
                property_path=check.property,
            ))

        return cls(report)

    def start_run(self) -> None:
        """Mark the run as started."""
        self.report.start()

    def finish_run(self) -> RunReport:
        """
        Mark the run as completed and return the final report.

        Returns:
            The completed RunReport with summary stats
        """
        self.report.complete()
        return self.report

    def start_check(self, check_id: str) -> CheckRecord | None:
        """Mark a check as started; returns None if the check is unknown."""
        record = self.report.get_check(check_id)
        if record:
            record.start()
        return record

    def complete_check_success(self, check_id: str) -> CheckRecord | None:
        """Mark a check as passed."""
        record = self.report.get_check(check_id)
        if record:
            record.complete(CheckStatus.PASSED)
        return record

    def complete_check_failure(self, check_id: str, failure_message: str) -> CheckRecord | None:
        """
        Mark a check as failed.

        Args:
            check_id: The ID of the check
            failure_message: The assertion failure message

        Returns:
            The CheckRecord, or None if check not found
        """
        record = self.report.get_check(check_id)
        if record:
            record.failure_message = failure_message
            record.complete(CheckStatus.FAILED)
        return record

    def complete_check_error(
        self,
        check_id: str,
        error_message: str,
        error_type: str | None = None,
    ) -> CheckRecord | None:
        """
        Mark a check as errored (the check could not be evaluated).

        Args:
            check_id: The ID of the check
            error_message: Error description
            error_type: Name of the exception class

        Returns:
            The CheckRecord, or None if check not found
        """
        record = self.report.get_check(check_id)
        if record:
            record.error_message = error_message
            record.error_type = error_type
            record.complete(CheckStatus.ERROR)
        return record

    def save_json(self, path: str | Path) -> None:
        """
        Save the report to a JSON file.

        Args:
            path: Path to save the JSON file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.report.to_json())

    def get_summary(self) -> str:
        """Get a human-readable summary of the run."""
        return self.report.summary()


def _suite_to_dict(suite: Suite) -> dict[str, Any]:
    """Convert a Suite to a dict for hashing."""
    return {
        "version": suite.version,
        "name": suite.name,
        "settings": suite.settings,
        "groups": {
            name: {"kind": group.kind.value, "values": group.values}
            for name, group in suite.groups.items()
        },
        "checks": [
            {
                "id": check.id,
                "group": check.group,
                "op": check.op.value,
                "value": check.value,
                "index": check.index,
                "delta": check.delta,
                "property": check.property,
                "description": check.description,
                "message": check.message,
            }
            for check in suite.checks
        ],
    }
