"""
Failure message rendering and raising.

Every failed assertion goes through this module: values are rendered,
the optional description is prefixed, and the failure is raised.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from ..errors import AssertionFailure, ComparisonFailure
from ..settings import get_settings

logger = logging.getLogger(__name__)


def format_value(value: Any, max_length: int | None = None) -> str:
    """Render a value for display, truncating if too long."""
    if max_length is None:
        max_length = get_settings().max_value_length

    if isinstance(value, (bytes, bytearray)):
        formatted = repr(list(value))
    elif hasattr(value, "typecode") and hasattr(value, "tolist"):
        # array.array
        formatted = repr(value.tolist())
    else:
        formatted = repr(value)

    if max_length is not None and len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted


def format_description(description: str | None) -> str:
    """Return the '[description] ' prefix, or '' when there is none."""
    if not description:
        return ""
    return f"[{description}] "


def format_message(description: str | None, template: str, *values: Any) -> str:
    """
    Compose a failure message.

    Args:
        description: Optional label of the value under test
        template: Message with one '{}' placeholder per value
        values: Values to render into the template

    Returns:
        The description prefix followed by the formatted template
    """
    rendered = [format_value(v) for v in values]
    return format_description(description) + template.format(*rendered)


def fail(
    template: str,
    *values: Any,
    description: str | None = None,
    override: str | None = None,
) -> NoReturn:
    """
    Raise an AssertionFailure.

    An override message replaces the composed message entirely.
    """
    if override is not None:
        message = override
    else:
        message = format_message(description, template, *values)
    logger.debug("Assertion failed: %s", message)
    raise AssertionFailure(message)


def comparison_failure(
    description: str | None, expected: Any, actual: Any
) -> ComparisonFailure | None:
    """
    Build the rich failure for an equality check.

    Returns None when rich comparison failures are disabled, in which
    case the caller raises a plain AssertionFailure.
    """
    if not get_settings().rich_comparison_failures:
        return None
    message = format_message(description, "expected:<{}> but was:<{}>", expected, actual)
    return ComparisonFailure(message, expected=expected, actual=actual)
