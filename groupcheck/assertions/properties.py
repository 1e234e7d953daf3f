"""
Property extraction for object groups.

A path resolver turns a group of elements into the group of values of
one (possibly nested) property. The engine only depends on the
PathResolver interface; the default resolver understands dotted
attribute paths and, for mapping elements, JSONPath expressions.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Sequence

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

from ..errors import IntrospectionError, InvalidArgumentError

logger = logging.getLogger(__name__)


class PathResolver(ABC):
    """Extracts one value per element for a property path."""

    @abstractmethod
    def values_of(self, path: str, elements: Sequence[Any]) -> list[Any]:
        """
        Resolve a path on every element, preserving order.

        Raises:
            IntrospectionError: If any element lacks the property
        """
        ...


class AttributePathResolver(PathResolver):
    """
    Default resolver.

    Supports:
    - dotted paths: "father.age" reads attributes, or keys of mappings
    - JSONPath: "$.father.age" is evaluated with jsonpath_ng; the first
      match per element is used

    A None element, or a None intermediate value, resolves to None.
    """

    def values_of(self, path: str, elements: Sequence[Any]) -> list[Any]:
        if path.startswith("$"):
            values = self._values_by_jsonpath(path, elements)
        else:
            values = [self._value_by_attributes(path, e) for e in elements]
        logger.debug("Extracted %r from %d element(s)", path, len(values))
        return values

    def _values_by_jsonpath(self, path: str, elements: Sequence[Any]) -> list[Any]:
        try:
            expression = parse_jsonpath(path)
        except (JsonPathLexerError, JsonPathParserError) as e:
            raise InvalidArgumentError(f"Invalid JSONPath expression {path!r}: {e}") from e

        values = []
        for element in elements:
            if element is None:
                values.append(None)
                continue
            matches = expression.find(element)
            if not matches:
                raise IntrospectionError(
                    f"No value at {path!r} in element {element!r}", path=path, element=element
                )
            values.append(matches[0].value)
        return values

    def _value_by_attributes(self, path: str, element: Any) -> Any:
        names = path.split(".")
        if not all(names):
            raise InvalidArgumentError(f"Invalid property path {path!r}")

        value = element
        for depth, name in enumerate(names):
            if value is None:
                return None
            if isinstance(value, Mapping):
                if name not in value:
                    raise self._missing(path, names[: depth + 1], element)
                value = value[name]
            else:
                try:
                    value = getattr(value, name)
                except AttributeError as e:
                    raise self._missing(path, names[: depth + 1], element) from e
        return value

    @staticmethod
    def _missing(path: str, resolved: list[str], element: Any) -> IntrospectionError:
        return IntrospectionError(
            f"Unable to find property {'.'.join(resolved)!r} (path {path!r}) in {element!r}",
            path=path,
            element=element,
        )


_resolver: PathResolver = AttributePathResolver()


def get_path_resolver() -> PathResolver:
    return _resolver


def set_path_resolver(resolver: PathResolver | None) -> PathResolver:
    """Install a resolver (None restores the default) and return it."""
    global _resolver
    _resolver = resolver if resolver is not None else AttributePathResolver()
    return _resolver
