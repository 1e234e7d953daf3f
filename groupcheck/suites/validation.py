"""
Schema validation for check suites.

This module contains the validation logic that checks raw parsed YAML
against the suite schema and reports errors with helpful messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from ..settings import Settings
from .models import MULTI_VALUE_OPS, NO_VALUE_OPS, SEQUENCE_OPS, CheckOp, GroupKind


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "checks[0].value"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Schema Validator
# ─────────────────────────────────────────────────────────────────────────────

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# Element check per typed array kind
ELEMENT_CHECKS = {
    GroupKind.INT_ARRAY: (lambda v: isinstance(v, int) and not isinstance(v, bool), "integers"),
    GroupKind.FLOAT_ARRAY: (_is_number, "numbers"),
    GroupKind.BOOL_ARRAY: (lambda v: isinstance(v, bool), "booleans"),
    GroupKind.CHAR_ARRAY: (lambda v: isinstance(v, str) and len(v) == 1, "single characters"),
}

# Kinds whose elements can be projected with 'property'
PROPERTY_KINDS = {GroupKind.LIST, GroupKind.SET, GroupKind.ITERATOR, GroupKind.ARRAY}


class SchemaValidator:
    """Validates raw parsed YAML against the suite schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "groups", "checks"}
    OPTIONAL_TOP_LEVEL = {"settings"}
    CHECK_FIELDS = {"id", "group", "op", "value", "index", "delta", "property", "description", "message"}
    VALID_KINDS = {k.value for k in GroupKind}
    VALID_OPS = {op.value for op in CheckOp}
    VALID_SETTINGS = {f.name for f in fields(Settings)}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()
        self.check_ids: set[str] = set()
        self.group_kinds: dict[str, GroupKind] = {}

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_settings()
        self._validate_groups()
        self._validate_checks()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your suite file"
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your suite"
            )

    def _validate_settings(self) -> None:
        settings = self.data.get("settings")
        if settings is None:
            return
        if not isinstance(settings, dict):
            self.result.add_error(
                "settings",
                "Must be an object",
                value=settings
            )
            return

        for key in settings:
            if key not in self.VALID_SETTINGS:
                self.result.add_error(
                    f"settings.{key}",
                    "Unknown setting",
                    suggestion=f"Valid settings: {', '.join(sorted(self.VALID_SETTINGS))}"
                )

        max_length = settings.get("max_value_length")
        if max_length is not None and (not isinstance(max_length, int) or isinstance(max_length, bool) or max_length < 4):
            self.result.add_error(
                "settings.max_value_length",
                "Must be an integer >= 4",
                value=max_length
            )

        rich = settings.get("rich_comparison_failures")
        if rich is not None and not isinstance(rich, bool):
            self.result.add_error(
                "settings.rich_comparison_failures",
                "Must be a boolean",
                value=rich
            )

    def _validate_groups(self) -> None:
        groups = self.data.get("groups")
        if not isinstance(groups, dict):
            self.result.add_error(
                "groups",
                "Must be an object (group name -> values)",
                value=groups
            )
            return

        if len(groups) == 0:
            self.result.add_error(
                "groups",
                "Must define at least one group",
                suggestion="Add a group like 'skus: [a, b, c]'"
            )
            return

        for name, group in groups.items():
            self._validate_group(str(name), group)

    def _validate_group(self, name: str, group: Any) -> None:
        path = f"groups.{name}"

        # Shorthand: a plain list (or null) is a list group
        if group is None or isinstance(group, list):
            self.group_kinds[name] = GroupKind.LIST
            return

        if not isinstance(group, dict):
            self.result.add_error(
                path,
                "Group must be a list, null, or an object with 'kind' and 'values'",
                value=group
            )
            return

        unknown = set(group) - {"kind", "values"}
        for key in sorted(unknown, key=str):
            self.result.add_error(
                f"{path}.{key}",
                "Unknown group field",
                suggestion="Valid fields are: kind, values"
            )

        kind = group.get("kind", GroupKind.LIST.value)
        if kind not in self.VALID_KINDS:
            self.result.add_error(
                f"{path}.kind",
                "Invalid group kind",
                value=kind,
                suggestion=f"Valid kinds: {', '.join(sorted(self.VALID_KINDS))}"
            )
            return
        kind = GroupKind(kind)
        self.group_kinds[name] = kind

        if "values" not in group:
            self.result.add_error(
                f"{path}.values",
                "Group object requires a 'values' field",
                suggestion="Use 'values: null' for an absent group"
            )
            return

        values = group["values"]
        if values is None:
            return
        if not isinstance(values, list):
            self.result.add_error(
                f"{path}.values",
                "Must be a list or null",
                value=values
            )
            return

        if kind in ELEMENT_CHECKS:
            accepts, label = ELEMENT_CHECKS[kind]
            for i, element in enumerate(values):
                if not accepts(element):
                    self.result.add_error(
                        f"{path}.values[{i}]",
                        f"Elements of a {kind.value} group must be {label}",
                        value=element
                    )

    def _validate_checks(self) -> None:
        checks = self.data.get("checks")
        if not isinstance(checks, list):
            self.result.add_error(
                "checks",
                "Must be a list",
                value=checks
            )
            return

        if len(checks) == 0:
            self.result.add_error(
                "checks",
                "Must contain at least one check",
                suggestion="Add a check like '{id: unique, group: skus, op: does_not_have_duplicates}'"
            )
            return

        for i, check in enumerate(checks):
            self._validate_check(i, check)

    def _validate_check(self, index: int, check: Any) -> None:
        path = f"checks[{index}]"

        if not isinstance(check, dict):
            self.result.add_error(
                path,
                "Check must be an object",
                value=check
            )
            return

        for key in sorted(set(check) - self.CHECK_FIELDS, key=str):
            self.result.add_error(
                f"{path}.{key}",
                "Unknown check field",
                suggestion=f"Valid fields are: {', '.join(sorted(self.CHECK_FIELDS))}"
            )

        check_id = check.get("id")
        if not check_id:
            self.result.add_error(
                f"{path}.id",
                "Check must have an 'id' field",
                suggestion="Add a unique identifier like 'id: unique-skus'"
            )
        elif not isinstance(check_id, str):
            self.result.add_error(
                f"{path}.id",
                "Check id must be a string",
                value=check_id
            )
        elif check_id in self.check_ids:
            self.result.add_error(
                f"{path}.id",
                "Duplicate check id",
                value=check_id,
                suggestion="Each check must have a unique id"
            )
        else:
            self.check_ids.add(check_id)

        group = check.get("group")
        kind = None
        if not isinstance(group, str):
            self.result.add_error(
                f"{path}.group",
                "Check requires a 'group' field (group name)",
                value=group
            )
        elif group not in self.group_kinds and group not in (self.data.get("groups") or {}):
            self.result.add_error(
                f"{path}.group",
                "References unknown group",
                value=group,
                suggestion=f"Available groups: {', '.join(sorted(self.group_kinds)) or '(none)'}"
            )
        else:
            kind = self.group_kinds.get(group)

        op = check.get("op")
        if op not in self.VALID_OPS:
            self.result.add_error(
                f"{path}.op",
                "Invalid check operator",
                value=op,
                suggestion=f"Valid operators: {', '.join(sorted(self.VALID_OPS))}"
            )
            return
        op = CheckOp(op)

        self._validate_value(path, op, check)
        self._validate_op_fields(path, op, kind, check)

        for key in ("property", "description", "message"):
            text = check.get(key)
            if text is not None and not isinstance(text, str):
                self.result.add_error(
                    f"{path}.{key}",
                    "Must be a string",
                    value=text
                )

        if check.get("property") is not None and kind is not None and kind not in PROPERTY_KINDS:
            self.result.add_error(
                f"{path}.property",
                f"Property extraction is not supported on {kind.value} groups",
                suggestion=f"Use it on: {', '.join(sorted(k.value for k in PROPERTY_KINDS))}"
            )

    def _validate_value(self, path: str, op: CheckOp, check: dict) -> None:
        has_value = "value" in check
        value = check.get("value")

        if op in NO_VALUE_OPS:
            if has_value:
                self.result.add_error(
                    f"{path}.value",
                    f"Operator '{op.value}' takes no 'value'"
                )
            return

        if not has_value:
            self.result.add_error(
                f"{path}.value",
                f"Operator '{op.value}' requires a 'value' field"
            )
            return

        if op in MULTI_VALUE_OPS and not isinstance(value, list):
            self.result.add_error(
                f"{path}.value",
                f"Operator '{op.value}' requires a list of values",
                value=value,
                suggestion="Use 'value: [a, b]'"
            )
        elif op == CheckOp.HAS_SIZE and (not isinstance(value, int) or isinstance(value, bool) or value < 0):
            self.result.add_error(
                f"{path}.value",
                "Size must be a non-negative integer",
                value=value
            )
        elif op in {CheckOp.IS_EQUAL_TO, CheckOp.IS_NOT_EQUAL_TO} and value is not None and not isinstance(value, list):
            self.result.add_error(
                f"{path}.value",
                "Must be a list or null",
                value=value
            )

    def _validate_op_fields(self, path: str, op: CheckOp, kind: GroupKind | None, check: dict) -> None:
        index = check.get("index")
        if op == CheckOp.CONTAINS_AT:
            if index is None:
                self.result.add_error(
                    f"{path}.index",
                    "Operator 'contains_at' requires an 'index' field"
                )
            elif not isinstance(index, int) or isinstance(index, bool):
                self.result.add_error(
                    f"{path}.index",
                    "Index must be an integer",
                    value=index
                )
        elif index is not None:
            self.result.add_error(
                f"{path}.index",
                "'index' is only valid with operator 'contains_at'"
            )

        tolerance = check.get("delta")
        if tolerance is not None:
            if op != CheckOp.IS_EQUAL_TO:
                self.result.add_error(
                    f"{path}.delta",
                    "'delta' is only valid with operator 'is_equal_to'"
                )
            elif kind is not None and kind != GroupKind.FLOAT_ARRAY:
                self.result.add_error(
                    f"{path}.delta",
                    "'delta' is only valid on float_array groups",
                    value=kind.value
                )
            elif not _is_number(tolerance) or tolerance < 0:
                self.result.add_error(
                    f"{path}.delta",
                    "Delta must be a non-negative number",
                    value=tolerance
                )
            elif isinstance(check.get("value"), list):
                for i, element in enumerate(check["value"]):
                    if not _is_number(element):
                        self.result.add_error(
                            f"{path}.value[{i}]",
                            "Values compared within a delta must be numbers",
                            value=element
                        )

        if op in SEQUENCE_OPS and kind is not None and kind != GroupKind.LIST:
            self.result.add_error(
                f"{path}.op",
                f"Operator '{op.value}' requires a list group",
                value=kind.value,
                suggestion="Declare the group as a plain list or with 'kind: list'"
            )
