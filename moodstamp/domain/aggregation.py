"""
aggregation.py - Stamp aggregation
Single responsibility: reduce a post's raw stamps into per-type groups.

Groups come out in the order their type is first seen in the input, and
each group keeps its stamps in input order. Nothing is deduplicated here:
two stamps of the same type from the same reactor count twice. See
``policies.one_stamp_per_reactor`` for the opt-in collapse.
"""
import logging
import threading
from collections.abc import Iterable, Sequence

from moodstamp.domain.models import AggregatedStamp, Stamp

logger = logging.getLogger(__name__)


def aggregate(stamps: Iterable[Stamp]) -> tuple[AggregatedStamp, ...]:
    groups: dict[str, list[Stamp]] = {}
    for stamp in stamps:
        groups.setdefault(stamp.type, []).append(stamp)
    return tuple(
        AggregatedStamp(type=stamp_type, count=len(members), stamps=tuple(members))
        for stamp_type, members in groups.items()
    )


def flatten(groups: Iterable[AggregatedStamp]) -> tuple[Stamp, ...]:
    return tuple(stamp for group in groups for stamp in group.stamps)


# ---------------------------------------------------------------------------
# Memoization
# ---------------------------------------------------------------------------

CacheKey = tuple[Stamp, ...]


class StampAggregator:
    """
    Memoizing front for ``aggregate``.

    Results are keyed by the input's value (a tuple of frozen stamps), so two
    equal lists share one result. Concurrent callers with the same key are
    coalesced: one thread computes while the others wait for it. Nothing is
    evicted automatically; the caller decides when to ``invalidate`` or
    ``clear``.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._results: dict[CacheKey, tuple[AggregatedStamp, ...]] = {}
        self._pending: dict[CacheKey, threading.Event] = {}
        self.hits = 0
        self.misses = 0

    def __call__(self, stamps: Sequence[Stamp]) -> tuple[AggregatedStamp, ...]:
        return self.get(stamps)

    def get(self, stamps: Sequence[Stamp]) -> tuple[AggregatedStamp, ...]:
        key: CacheKey = tuple(stamps)
        while True:
            with self._lock:
                if key in self._results:
                    self.hits += 1
                    return self._results[key]
                waiter = self._pending.get(key)
                if waiter is None:
                    waiter = threading.Event()
                    self._pending[key] = waiter
                    self.misses += 1
                    break
            # another thread is computing this key
            waiter.wait()

        try:
            result = aggregate(key)
        except BaseException:
            with self._lock:
                self._pending.pop(key, None)
            waiter.set()
            raise

        with self._lock:
            self._results[key] = result
            self._pending.pop(key, None)
        waiter.set()
        logger.debug(f"Aggregated {len(key)} stamps into {len(result)} groups")
        return result

    def invalidate(self, stamps: Sequence[Stamp]) -> bool:
        with self._lock:
            return self._results.pop(tuple(stamps), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._results.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {"hits": self.hits, "misses": self.misses, "size": len(self._results)}


_default_aggregator = StampAggregator()


def aggregate_cached(stamps: Sequence[Stamp]) -> tuple[AggregatedStamp, ...]:
    return _default_aggregator.get(stamps)


def default_aggregator() -> StampAggregator:
    return _default_aggregator
