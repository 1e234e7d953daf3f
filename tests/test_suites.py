"""Tests for loading, validating and running check suites."""

import pytest

from groupcheck.reporting import CheckStatus, RunStatus
from groupcheck.settings import get_settings
from groupcheck.suites import (
    CheckOp,
    GroupKind,
    load_suite,
    run_suite,
    validate_suite_yaml,
)


def _errors_at(result, path):
    return [e for e in result.errors if e.path == path]


class TestLoading:
    """Tests for load_suite() and validate_suite_yaml()."""

    def test_load_valid_file(self, suite_file):
        suite, result = load_suite(suite_file)
        assert result.is_valid
        assert suite.name == "Inventory"
        assert suite.settings == {"max_value_length": 200}
        assert suite.groups["skus"].kind == GroupKind.LIST
        assert suite.groups["weights"].kind == GroupKind.FLOAT_ARRAY
        assert suite.checks[2].op == CheckOp.IS_EQUAL_TO
        assert suite.checks[2].delta == 0.001

    def test_missing_file(self, temp_dir):
        suite, result = load_suite(temp_dir / "nope.yaml")
        assert suite is None
        assert "File not found" in str(result)

    def test_invalid_yaml(self):
        suite, result = validate_suite_yaml("version: [1\n")
        assert suite is None
        assert "Invalid YAML syntax" in result.errors[0].message

    def test_not_an_object(self):
        suite, result = validate_suite_yaml("- 1\n- 2\n")
        assert suite is None
        assert not result.is_valid

    def test_null_group_is_absent(self):
        suite, result = validate_suite_yaml(
            "version: 1\nname: t\ngroups: {g: null}\n"
            "checks: [{id: c, group: g, op: is_none}]\n"
        )
        assert result.is_valid
        assert suite.groups["g"].values is None


class TestValidation:
    """Schema errors are reported with paths and suggestions."""

    def _validate(self, checks, groups="{skus: [a, b]}", extra=""):
        return validate_suite_yaml(
            f"version: 1\nname: t\n{extra}groups: {groups}\nchecks: {checks}\n"
        )

    def test_missing_top_level_fields(self):
        _, result = validate_suite_yaml("name: t\n")
        paths = {e.path for e in result.errors}
        assert {"version", "groups", "checks"} <= paths

    def test_unknown_op(self):
        _, result = self._validate("[{id: c, group: skus, op: contains_all, value: [a]}]")
        assert _errors_at(result, "checks[0].op")

    def test_unknown_group(self):
        _, result = self._validate("[{id: c, group: other, op: is_empty}]")
        errors = _errors_at(result, "checks[0].group")
        assert errors
        assert "skus" in errors[0].suggestion

    def test_duplicate_ids(self):
        _, result = self._validate("[{id: c, group: skus, op: is_empty}, {id: c, group: skus, op: is_not_empty}]")
        assert _errors_at(result, "checks[1].id")

    def test_contains_at_requires_index(self):
        _, result = self._validate("[{id: c, group: skus, op: contains_at, value: a}]")
        assert _errors_at(result, "checks[0].index")

    def test_index_only_with_contains_at(self):
        _, result = self._validate("[{id: c, group: skus, op: contains, value: [a], index: 1}]")
        assert _errors_at(result, "checks[0].index")

    def test_delta_only_with_is_equal_to(self):
        _, result = self._validate(
            "[{id: c, group: w, op: contains, value: [1.0], delta: 0.1}]",
            groups="{w: {kind: float_array, values: [1.0]}}",
        )
        assert _errors_at(result, "checks[0].delta")

    def test_delta_only_on_float_arrays(self):
        _, result = self._validate("[{id: c, group: skus, op: is_equal_to, value: [a], delta: 0.1}]")
        assert _errors_at(result, "checks[0].delta")

    def test_negative_delta(self):
        _, result = self._validate(
            "[{id: c, group: w, op: is_equal_to, value: [1.0], delta: -0.1}]",
            groups="{w: {kind: float_array, values: [1.0]}}",
        )
        assert "non-negative" in _errors_at(result, "checks[0].delta")[0].message

    def test_delta_values_must_be_numbers(self):
        _, result = self._validate(
            "[{id: c, group: w, op: is_equal_to, value: [x, 2.0], delta: 0.1}]",
            groups="{w: {kind: float_array, values: [1.0, 2.0]}}",
        )
        assert not result.is_valid
        assert _errors_at(result, "checks[0].value[0]")
        assert not _errors_at(result, "checks[0].value[1]")

    def test_multi_value_op_needs_list(self):
        _, result = self._validate("[{id: c, group: skus, op: contains, value: a}]")
        assert _errors_at(result, "checks[0].value")

    def test_no_value_op_rejects_value(self):
        _, result = self._validate("[{id: c, group: skus, op: is_empty, value: 1}]")
        assert _errors_at(result, "checks[0].value")

    def test_sequence_op_needs_list_group(self):
        _, result = self._validate(
            "[{id: c, group: s, op: starts_with, value: [a]}]",
            groups="{s: {kind: set, values: [a]}}",
        )
        assert _errors_at(result, "checks[0].op")

    def test_typed_group_elements(self):
        _, result = self._validate(
            "[{id: c, group: n, op: is_empty}]",
            groups="{n: {kind: int_array, values: [1, x]}}",
        )
        assert _errors_at(result, "groups.n.values[1]")

    def test_unknown_kind(self):
        _, result = self._validate(
            "[{id: c, group: n, op: is_empty}]",
            groups="{n: {kind: matrix, values: []}}",
        )
        assert _errors_at(result, "groups.n.kind")

    def test_unknown_setting(self):
        _, result = self._validate(
            "[{id: c, group: skus, op: is_empty}]",
            extra="settings: {colour: true}\n",
        )
        assert _errors_at(result, "settings.colour")

    def test_property_not_on_primitive_arrays(self):
        _, result = self._validate(
            "[{id: c, group: n, op: is_empty, property: x}]",
            groups="{n: {kind: int_array, values: [1]}}",
        )
        assert _errors_at(result, "checks[0].property")

    def test_unknown_check_field(self):
        _, result = self._validate("[{id: c, group: skus, op: is_empty, expected: 1}]")
        assert _errors_at(result, "checks[0].expected")


class TestRunner:
    """Tests for run_suite()."""

    def _run(self, text):
        suite, result = validate_suite_yaml(text)
        assert result.is_valid, str(result)
        return run_suite(suite).report

    def test_all_checks_pass(self, suite_file):
        suite, _ = load_suite(suite_file)
        report = run_suite(suite).finish_run()
        assert report.status == RunStatus.PASSED
        assert report.passed_checks == 4

    def test_failure_recorded_with_message(self, failing_suite_file):
        suite, _ = load_suite(failing_suite_file)
        report = run_suite(suite).report
        assert report.status == RunStatus.FAILED
        record = report.get_check("unique-skus")
        assert record.status == CheckStatus.FAILED
        assert record.failure_message == "<['a', 'b', 'a']> contains duplicate(s):<['a']>"
        assert report.get_check("has-a").status == CheckStatus.PASSED

    def test_iterator_group_is_fresh_per_check(self):
        report = self._run(
            "version: 1\nname: t\n"
            "groups: {it: {kind: iterator, values: [1, 2]}}\n"
            "checks:\n"
            "  - {id: a, group: it, op: has_size, value: 2}\n"
            "  - {id: b, group: it, op: contains_only, value: [2, 1]}\n"
        )
        assert report.passed_checks == 2

    def test_description_and_message(self):
        report = self._run(
            "version: 1\nname: t\ngroups: {g: [1]}\n"
            "checks:\n"
            "  - {id: a, group: g, op: contains, value: [2], description: ids}\n"
            "  - {id: b, group: g, op: contains, value: [2], message: custom}\n"
        )
        assert report.get_check("a").failure_message == "[ids] <[1]> does not contain element(s):<[2]>"
        assert report.get_check("b").failure_message == "custom"

    def test_contains_at_out_of_range_is_error(self):
        report = self._run(
            "version: 1\nname: t\ngroups: {g: [1]}\n"
            "checks: [{id: a, group: g, op: contains_at, value: 1, index: 5}]\n"
        )
        record = report.get_check("a")
        assert record.status == CheckStatus.ERROR
        assert record.error_type == "IndexOutOfRangeError"
        assert report.status == RunStatus.ERROR

    def test_property_extraction(self):
        report = self._run(
            "version: 1\nname: t\n"
            "groups: {rows: [{sku: a}, {sku: b}]}\n"
            "checks:\n"
            "  - {id: a, group: rows, op: contains_sequence, value: [a, b], property: sku}\n"
            "  - {id: b, group: rows, op: contains, value: [c], property: $.sku}\n"
            "  - {id: c, group: rows, op: is_empty, property: price}\n"
        )
        assert report.get_check("a").status == CheckStatus.PASSED
        assert report.get_check("b").status == CheckStatus.FAILED
        assert report.get_check("c").status == CheckStatus.ERROR
        assert report.get_check("c").error_type == "IntrospectionError"

    def test_float_delta(self):
        report = self._run(
            "version: 1\nname: t\n"
            "groups: {w: {kind: float_array, values: [1.0, 2.0]}}\n"
            "checks:\n"
            "  - {id: a, group: w, op: is_equal_to, value: [1.0001, 2.0], delta: 0.001}\n"
            "  - {id: b, group: w, op: is_equal_to, value: [1.1, 2.0], delta: 0.001}\n"
        )
        assert report.get_check("a").status == CheckStatus.PASSED
        assert "using delta:<0.001>" in report.get_check("b").failure_message

    def test_absent_group(self):
        report = self._run(
            "version: 1\nname: t\ngroups: {g: null}\n"
            "checks:\n"
            "  - {id: a, group: g, op: is_none}\n"
            "  - {id: b, group: g, op: is_not_empty}\n"
        )
        assert report.get_check("a").status == CheckStatus.PASSED
        assert report.get_check("b").failure_message == "expecting actual value not to be None"

    def test_suite_settings_scoped_to_run(self):
        report = self._run(
            "version: 1\nname: t\nsettings: {max_value_length: 8}\n"
            "groups: {g: [100, 200, 300]}\n"
            "checks: [{id: a, group: g, op: contains, value: [1]}]\n"
        )
        assert report.get_check("a").failure_message.startswith("<[100,...>")
        assert get_settings().max_value_length is None

    def test_set_and_array_kinds(self):
        report = self._run(
            "version: 1\nname: t\n"
            "groups:\n"
            "  s: {kind: set, values: [b, a]}\n"
            "  t: {kind: array, values: [[1, 2], 3]}\n"
            "  c: {kind: char_array, values: [x, y]}\n"
            "  f: {kind: bool_array, values: [true, true]}\n"
            "checks:\n"
            "  - {id: a, group: s, op: contains_only, value: [a, b]}\n"
            "  - {id: b, group: t, op: is_equal_to, value: [[1, 2], 3]}\n"
            "  - {id: c, group: c, op: excludes, value: [z]}\n"
            "  - {id: d, group: f, op: does_not_have_duplicates}\n"
        )
        statuses = [record.status for record in report.checks]
        assert statuses == [CheckStatus.PASSED] * 3 + [CheckStatus.FAILED]

    def test_non_numeric_delta_values_are_errors(self):
        suite, result = validate_suite_yaml(
            "version: 1\nname: t\n"
            "groups: {w: {kind: float_array, values: [1.0]}}\n"
            "checks: [{id: a, group: w, op: is_equal_to, value: [1.0], delta: 0.1}]\n"
        )
        assert result.is_valid, str(result)
        suite.checks[0].value = ["x"]
        record = run_suite(suite).report.get_check("a")
        assert record.status == CheckStatus.ERROR
        assert record.error_type == "InvalidArgumentError"

    def test_unexpected_exception_is_recorded_as_error(self):
        class Exploding:
            def __eq__(self, other):
                raise RuntimeError("boom")

            __hash__ = None

        suite, result = validate_suite_yaml(
            "version: 1\nname: t\ngroups: {g: [1]}\n"
            "checks:\n"
            "  - {id: a, group: g, op: contains, value: [[2]]}\n"
            "  - {id: b, group: g, op: is_not_empty}\n"
        )
        assert result.is_valid, str(result)
        suite.groups["g"].values = [Exploding()]
        report = run_suite(suite).report
        record = report.get_check("a")
        assert record.status == CheckStatus.ERROR
        assert record.error_type == "RuntimeError"
        assert "boom" in record.error_message
        assert report.get_check("b").status == CheckStatus.PASSED
        assert report.status == RunStatus.ERROR
