"""
Suite runner.

Executes every check of a parsed suite through the assertion engine and
records the outcome of each in a Reporter.
"""

from __future__ import annotations

import logging
from array import array
from typing import TYPE_CHECKING

from rich.markup import escape

from ..assertions import (
    BoolArrayAssert,
    CharArrayAssert,
    CollectionAssert,
    FloatArrayAssert,
    GroupAssert,
    IntArrayAssert,
    IteratorAssert,
    ListAssert,
    ObjectArrayAssert,
)
from ..errors import AssertionFailure, IntrospectionError, InvalidArgumentError
from ..reporting import Reporter
from ..settings import override_settings
from .models import MULTI_VALUE_OPS, Check, CheckOp, GroupKind, GroupSpec, Suite

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)


def build_assertion(group: GroupSpec) -> GroupAssert:
    """
    Create a fresh assertion over a group.

    Each call builds its own source, so iterator groups are drained
    independently by every check.
    """
    values = group.values
    if group.kind == GroupKind.LIST:
        return ListAssert(None if values is None else list(values))
    if group.kind == GroupKind.SET:
        return CollectionAssert(None if values is None else list(values))
    if group.kind == GroupKind.ITERATOR:
        return IteratorAssert(None if values is None else iter(values))
    if group.kind == GroupKind.ARRAY:
        return ObjectArrayAssert(None if values is None else tuple(values))
    if group.kind == GroupKind.INT_ARRAY:
        return IntArrayAssert(None if values is None else list(values))
    if group.kind == GroupKind.FLOAT_ARRAY:
        return FloatArrayAssert(None if values is None else array("d", values))
    if group.kind == GroupKind.BOOL_ARRAY:
        return BoolArrayAssert(None if values is None else list(values))
    if group.kind == GroupKind.CHAR_ARRAY:
        return CharArrayAssert(None if values is None else list(values))
    raise InvalidArgumentError(f"Unsupported group kind: {group.kind}")


def apply_check(assertion: GroupAssert, check: Check) -> None:
    """Run one check; raises whatever the assertion raises."""
    assertion.as_(check.description).overriding_error_message(check.message)
    if check.property:
        assertion = assertion.on_property(check.property)
        assertion.as_(check.description).overriding_error_message(check.message)

    op = check.op
    if op in MULTI_VALUE_OPS:
        getattr(assertion, op.value)(*check.value)
    elif op == CheckOp.CONTAINS_AT:
        assertion.contains_at(check.value, check.index)
    elif op == CheckOp.IS_EQUAL_TO and check.delta is not None:
        assertion.is_equal_to(check.value, delta=check.delta)
    elif op in (CheckOp.IS_EQUAL_TO, CheckOp.IS_NOT_EQUAL_TO):
        expected = check.value
        # Object array groups are tuples; YAML lists compare against them as tuples
        if isinstance(assertion, ObjectArrayAssert) and isinstance(expected, list):
            expected = tuple(expected)
        getattr(assertion, op.value)(expected)
    elif op == CheckOp.HAS_SIZE:
        getattr(assertion, op.value)(check.value)
    else:
        getattr(assertion, op.value)()


def run_suite(
    suite: Suite,
    console: Console | None = None,
    verbose: bool = True,
) -> Reporter:
    """
    Execute a suite and return the reporter with results.

    Args:
        suite: The parsed suite
        console: Optional rich console for progress output
        verbose: Print every check, not only failures and errors
    """
    reporter = Reporter.from_suite(suite)
    reporter.start_run()

    if console and verbose:
        console.print(f"\n{'='*60}")
        console.print(f"  [bold]Running:[/bold] {escape(suite.name)}")
        console.print(f"  [bold]Groups:[/bold] {len(suite.groups)}")
        console.print(f"  [bold]Checks:[/bold] {len(suite.checks)}")
        console.print(f"{'='*60}\n")

    with override_settings(**suite.settings):
        for check in suite.checks:
            reporter.start_check(check.id)
            logger.debug("Running check %s: %s on %s", check.id, check.op.value, check.group)

            try:
                apply_check(build_assertion(suite.groups[check.group]), check)
            except AssertionFailure as e:
                reporter.complete_check_failure(check.id, str(e))
                if console:
                    console.print(f"❌ [bold]{escape(check.id)}[/bold] [red]Failed:[/red] {escape(str(e))}")
            except (InvalidArgumentError, IntrospectionError) as e:
                logger.warning("Check %s could not be evaluated: %s", check.id, e)
                reporter.complete_check_error(check.id, str(e), type(e).__name__)
                if console:
                    console.print(f"⚠️  [bold]{escape(check.id)}[/bold] [yellow]Error:[/yellow] {type(e).__name__}: {escape(str(e))}")
            except Exception as e:
                logger.exception("Check %s raised unexpectedly", check.id)
                reporter.complete_check_error(check.id, f"{type(e).__name__}: {e}", type(e).__name__)
                if console:
                    console.print(f"❌ [bold]{escape(check.id)}[/bold] [red]Error:[/red] {type(e).__name__}: {escape(str(e))}")
            else:
                reporter.complete_check_success(check.id)
                if console and verbose:
                    console.print(f"✅ [bold]{escape(check.id)}[/bold] [green]Passed[/green]")

    reporter.finish_run()
    return reporter
