"""
Runtime settings for groupcheck.

Settings are process-wide and read whenever a failure message is
rendered, so changes apply to every failure raised afterwards.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Iterator

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Settings:
    """
    Tunable behaviour of the assertion engine.

    Attributes:
        max_value_length: Truncate rendered values in failure messages
            to this many characters (None disables truncation)
        rich_comparison_failures: Raise ComparisonFailure, carrying
            expected/actual, from equality checks
    """
    max_value_length: int | None = None
    rich_comparison_failures: bool = True


_settings = Settings()


def get_settings() -> Settings:
    """Return the active settings."""
    return _settings


def configure(**overrides: Any) -> Settings:
    """
    Replace individual settings and return the new active settings.

    Raises:
        InvalidArgumentError: If a key is unknown or a value is invalid
    """
    global _settings
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise InvalidArgumentError(
            f"Unknown setting(s): {', '.join(sorted(unknown))}. "
            f"Valid settings are: {', '.join(sorted(known))}"
        )
    max_length = overrides.get("max_value_length")
    if max_length is not None and (not isinstance(max_length, int) or max_length < 4):
        raise InvalidArgumentError("max_value_length must be an integer >= 4 or None")
    _settings = replace(_settings, **overrides)
    return _settings


def reset_settings() -> Settings:
    """Restore the default settings."""
    global _settings
    _settings = Settings()
    return _settings


@contextmanager
def override_settings(**overrides: Any) -> Iterator[Settings]:
    """Apply settings for the duration of a block, then restore the previous ones."""
    global _settings
    previous = _settings
    try:
        yield configure(**overrides)
    finally:
        _settings = previous
