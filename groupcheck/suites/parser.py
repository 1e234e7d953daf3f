"""
Schema parser for check suites.

This module converts validated YAML data into typed Suite structures.
"""

from __future__ import annotations

from typing import Any

from .models import Check, CheckOp, GroupKind, GroupSpec, Suite


class SchemaParser:
    """Parses and converts validated YAML to typed Suite structure."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> Suite:
        """Convert validated data to typed Suite."""
        return Suite(
            version=self.data["version"],
            name=self.data["name"],
            settings=dict(self.data.get("settings") or {}),
            groups=self._parse_groups(),
            checks=self._parse_checks(),
        )

    def _parse_groups(self) -> dict[str, GroupSpec]:
        groups: dict[str, GroupSpec] = {}
        for name, group in self.data["groups"].items():
            name = str(name)
            if group is None or isinstance(group, list):
                groups[name] = GroupSpec(name=name, kind=GroupKind.LIST, values=group)
            else:
                groups[name] = GroupSpec(
                    name=name,
                    kind=GroupKind(group.get("kind", GroupKind.LIST.value)),
                    values=group["values"],
                )
        return groups

    def _parse_checks(self) -> list[Check]:
        return [self._parse_check(check) for check in self.data["checks"]]

    def _parse_check(self, check: dict) -> Check:
        return Check(
            id=check["id"],
            group=check["group"],
            op=CheckOp(check["op"]),
            value=check.get("value"),
            index=check.get("index"),
            delta=check.get("delta"),
            property=check.get("property"),
            description=check.get("description"),
            message=check.get("message"),
        )
