"""
One-time materialization of group contents.

A group may be backed by a single-pass iterator, so its elements are
copied into an owned snapshot on first demand and every later read is
served from that snapshot.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable

logger = logging.getLogger(__name__)


class ElementMaterializer:
    """
    Drains a source exactly once into an ordered, immutable snapshot.

    If the source raises while being drained, the materializer is spent:
    the same exception is raised again by every later call instead of
    draining what is left of the source.

    Example:
        materializer = ElementMaterializer(iter([1, 2, 3]))
        materializer.snapshot()   # (1, 2, 3), consumes the iterator
        materializer.snapshot()   # (1, 2, 3), served from the buffer
    """

    def __init__(self, source: Iterable[Any]):
        self._source = source
        self._snapshot: tuple[Any, ...] | None = None
        self._failure: BaseException | None = None
        self._lock = threading.Lock()

    @property
    def materialized(self) -> bool:
        return self._snapshot is not None

    @property
    def failed(self) -> bool:
        return self._failure is not None

    def snapshot(self) -> tuple[Any, ...]:
        """Return the snapshot, draining the source on the first call."""
        if self._snapshot is not None:
            return self._snapshot
        with self._lock:
            if self._failure is not None:
                raise self._failure
            if self._snapshot is None:
                source, self._source = self._source, None
                try:
                    self._snapshot = tuple(source)
                except Exception as e:
                    logger.debug("Draining %s failed: %r", type(source).__name__, e)
                    self._failure = e
                    raise
                logger.debug(
                    "Materialized %d element(s) from %s",
                    len(self._snapshot),
                    type(source).__name__,
                )
        return self._snapshot
