"""
Report data models for suite runs.

This module defines the data structures for capturing complete
run records including metadata, check results, and timing.
"""

from __future__ import annotations

import hashlib
import json
import uuid
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class CheckStatus(str, Enum):
    """Status of an individual check."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


class RunStatus(str, Enum):
    """Overall status of a suite run."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass
class CheckRecord:
    """
    Record of a single check.

    Captures what was checked, against what, how long it took,
    and the failure or error message if it did not pass.
    """
    check_id: str
    group: str
    op: str
    status: CheckStatus = CheckStatus.PENDING

    # Timing
    started_at: datetime | None = None
    ended_at: datetime | None = None
    duration_ms: float | None = None

    # What was checked
    expected_value: Any = None
    property_path: str | None = None

    # Errors and messages
    failure_message: str | None = None
    error_message: str | None = None
    error_type: str | None = None

    def start(self) -> None:
        """Mark the check as started."""
        self.status = CheckStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self, status: CheckStatus) -> None:
        """Mark the check as completed with given status."""
        self.status = status
        self.ended_at = datetime.now(timezone.utc)
        if self.started_at:
            delta = self.ended_at - self.started_at
            self.duration_ms = delta.total_seconds() * 1000

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "check_id": self.check_id,
            "group": self.group,
            "op": self.op,
            "status": self.status.value,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "expected_value": _safe_serialize(self.expected_value),
            "property_path": self.property_path,
            "failure_message": self.failure_message,
            "error_message": self.error_message,
            "error_type": self.error_type,
        }


@dataclass
class RunReport:
    """
    Complete record of a suite run.

    Contains metadata about the run, the suite being checked,
    and detailed records for each check.
    """
    # Run identification
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # Timing
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: datetime | None = None
    duration_ms: float | None = None

    # Suite info
    suite_name: str = ""
    suite_version: int = 1
    suite_hash: str = ""

    # Overall status
    status: RunStatus = RunStatus.PENDING

    # Check records
    checks: list[CheckRecord] = field(default_factory=list)

    # Summary stats
    total_checks: int = 0
    passed_checks: int = 0
    failed_checks: int = 0
    error_checks: int = 0

    def start(self) -> None:
        """Mark the run as started."""
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self) -> None:
        """Mark the run as completed and calculate final status."""
        self.ended_at = datetime.now(timezone.utc)
        delta = self.ended_at - self.started_at
        self.duration_ms = delta.total_seconds() * 1000

        counts = Counter(c.status for c in self.checks)
        self.total_checks = len(self.checks)
        self.passed_checks = counts[CheckStatus.PASSED]
        self.failed_checks = counts[CheckStatus.FAILED]
        self.error_checks = counts[CheckStatus.ERROR]

        # Any error outranks any failure
        if self.error_checks:
            self.status = RunStatus.ERROR
        elif self.failed_checks:
            self.status = RunStatus.FAILED
        else:
            self.status = RunStatus.PASSED

    def add_check(self, check: CheckRecord) -> None:
        """Add a check record to the run."""
        self.checks.append(check)

    def get_check(self, check_id: str) -> CheckRecord | None:
        """Get a check record by ID."""
        return next((c for c in self.checks if c.check_id == check_id), None)

    def checks_with_status(self, status: CheckStatus) -> list[CheckRecord]:
        """Check records in suite order that ended with the given status."""
        return [c for c in self.checks if c.status == status]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "suite_name": self.suite_name,
            "suite_version": self.suite_version,
            "suite_hash": self.suite_hash,
            "status": self.status.value,
            "summary": {
                "total": self.total_checks,
                "passed": self.passed_checks,
                "failed": self.failed_checks,
                "errors": self.error_checks,
            },
            "checks": [check.to_dict() for check in self.checks],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def summary(self) -> str:
        """
        Generate a human-readable summary.

        Failed and errored checks are listed with their messages, in
        suite order; passed checks are only named.
        """
        rule = "─" * 59
        duration = f"{self.duration_ms:.0f}ms" if self.duration_ms is not None else "N/A"
        lines = [
            "═" * 59,
            f"  Run Report: {self.suite_name}  (suite {self.suite_hash or '-'})",
            f"  {status_icon(self.status)} {self.status.value.upper()} in {duration}"
            f"  ·  {self.passed_checks}/{self.total_checks} passed,"
            f" {self.failed_checks} failed, {self.error_checks} errors",
        ]

        failed = self.checks_with_status(CheckStatus.FAILED)
        if failed:
            lines += [rule, "  Failures:"]
            for check in failed:
                lines.append(f"  {_describe(check)}")
                lines.append(f"      └─ {check.failure_message}")

        errored = self.checks_with_status(CheckStatus.ERROR)
        if errored:
            lines += [rule, "  Errors:"]
            for check in errored:
                lines.append(f"  {_describe(check)}")
                lines.append(f"      └─ {check.error_type or 'Error'}: {check.error_message}")

        unfinished = [c for c in self.checks if c.status in (CheckStatus.PENDING, CheckStatus.RUNNING)]
        if unfinished:
            lines += [rule, "  Not completed: " + ", ".join(c.check_id for c in unfinished)]

        passed = self.checks_with_status(CheckStatus.PASSED)
        if passed:
            lines += [rule, f"  {status_icon(CheckStatus.PASSED)} Passed: " + ", ".join(c.check_id for c in passed)]

        lines.append("═" * 59)
        return "\n".join(lines)


def compute_suite_hash(suite_dict: dict[str, Any]) -> str:
    """
    Compute a hash of the suite for tracking/versioning.

    Args:
        suite_dict: The suite data as a dict

    Returns:
        SHA-256 hash (first 12 chars)
    """
    serialized = json.dumps(suite_dict, sort_keys=True, default=str)
    hash_bytes = hashlib.sha256(serialized.encode()).hexdigest()
    return hash_bytes[:12]


def _safe_serialize(value: Any) -> Any:
    """Safely serialize a value, handling non-JSON types."""
    if value is None:
        return None
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)


STATUS_ICONS = {
    "pending": "⏳",
    "running": "🔄",
    "passed": "✅",
    "failed": "❌",
    "error": "⚠️",
}


def status_icon(status: RunStatus | CheckStatus) -> str:
    """Icon for a run or check status; both share the same values."""
    return STATUS_ICONS.get(status.value, "❓")


def _describe(check: CheckRecord) -> str:
    target = check.group if not check.property_path else f"{check.group}.{check.property_path}"
    return f"{status_icon(check.status)} [{check.check_id}] {check.op} on {target}"
