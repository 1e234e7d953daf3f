"""Tests for the one-time element snapshot."""

import threading

import pytest

from groupcheck.assertions import ElementMaterializer


class CountingIterable:
    """Iterable that counts how often it is iterated."""

    def __init__(self, values):
        self.values = values
        self.iterations = 0

    def __iter__(self):
        self.iterations += 1
        return iter(self.values)


class TestElementMaterializer:
    """Tests for ElementMaterializer."""

    def test_lazy_until_first_snapshot(self):
        source = CountingIterable([1, 2])
        materializer = ElementMaterializer(source)
        assert not materializer.materialized
        assert source.iterations == 0

    def test_snapshot_preserves_order_and_duplicates(self):
        materializer = ElementMaterializer(iter([3, 1, 3]))
        assert materializer.snapshot() == (3, 1, 3)

    def test_source_drained_once(self):
        source = CountingIterable([1, 2])
        materializer = ElementMaterializer(source)
        first = materializer.snapshot()
        second = materializer.snapshot()
        assert first is second
        assert source.iterations == 1
        assert materializer.materialized

    def test_single_pass_iterator(self):
        materializer = ElementMaterializer(x * 2 for x in range(3))
        assert materializer.snapshot() == (0, 2, 4)
        assert materializer.snapshot() == (0, 2, 4)

    def test_later_source_changes_not_observed(self):
        values = [1]
        materializer = ElementMaterializer(values)
        materializer.snapshot()
        values.append(2)
        assert materializer.snapshot() == (1,)

    def test_concurrent_callers_share_one_drain(self):
        source = CountingIterable(list(range(1000)))
        materializer = ElementMaterializer(source)
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(materializer.snapshot())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert source.iterations == 1
        assert all(result is results[0] for result in results)

    def test_failed_drain_is_not_retried(self):
        def failing():
            yield 1
            yield 2
            raise RuntimeError("source broke")

        materializer = ElementMaterializer(failing())
        with pytest.raises(RuntimeError, match="source broke"):
            materializer.snapshot()
        with pytest.raises(RuntimeError, match="source broke"):
            materializer.snapshot()
        assert materializer.failed
        assert not materializer.materialized
