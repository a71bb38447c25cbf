import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from moodstamp.domain import aggregation
from moodstamp.domain.aggregation import StampAggregator, aggregate_cached


def test_equal_inputs_share_one_result(mock_stamps):
    aggregator = StampAggregator()

    first = aggregator.get(mock_stamps)
    second = aggregator.get(list(mock_stamps))

    assert first is second
    assert aggregator.stats() == {"hits": 1, "misses": 1, "size": 1}


def test_changed_input_is_recomputed(mock_stamps, make_stamp):
    aggregator = StampAggregator()
    before = aggregator(mock_stamps)

    after = aggregator([*mock_stamps, make_stamp("4", "sad")])

    assert before is not after
    assert sum(g.count for g in after) == 4


def test_invalidate_and_clear(mock_stamps):
    aggregator = StampAggregator()
    aggregator.get(mock_stamps)

    assert aggregator.invalidate(mock_stamps)
    assert not aggregator.invalidate(mock_stamps)

    aggregator.get(mock_stamps)
    aggregator.clear()
    assert aggregator.stats() == {"hits": 0, "misses": 0, "size": 0}


def test_concurrent_callers_compute_once(monkeypatch, mock_stamps):
    calls = []
    started = threading.Event()
    release = threading.Event()
    real_aggregate = aggregation.aggregate

    def slow_aggregate(stamps):
        calls.append(stamps)
        started.set()
        release.wait(timeout=5)
        return real_aggregate(stamps)

    monkeypatch.setattr(aggregation, "aggregate", slow_aggregate)
    aggregator = StampAggregator()

    with ThreadPoolExecutor(max_workers=8) as pool:
        futures = [pool.submit(aggregator.get, list(mock_stamps)) for _ in range(8)]
        assert started.wait(timeout=5)
        release.set()
        results = [f.result(timeout=5) for f in futures]

    assert len(calls) == 1
    assert all(r is results[0] for r in results)


def test_failed_computation_is_not_cached(monkeypatch, mock_stamps):
    real_aggregate = aggregation.aggregate
    outcomes = iter([RuntimeError("boom"), None])

    def flaky(stamps):
        err = next(outcomes)
        if err:
            raise err
        return real_aggregate(stamps)

    monkeypatch.setattr(aggregation, "aggregate", flaky)
    aggregator = StampAggregator()

    with pytest.raises(RuntimeError):
        aggregator.get(mock_stamps)
    assert len(aggregator.get(mock_stamps)) == 2
    assert aggregator.stats()["misses"] == 2


def test_module_level_cache(fresh_default_aggregator, mock_stamps):
    assert aggregate_cached(mock_stamps) is aggregate_cached(tuple(mock_stamps))
