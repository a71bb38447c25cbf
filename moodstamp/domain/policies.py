"""
policies.py - Stamp policies applied before aggregation
Single responsibility: optional reshaping of raw stamps (never done by aggregate).
"""
import logging
from collections.abc import Iterable

from moodstamp.domain.models import Stamp

logger = logging.getLogger(__name__)


def one_stamp_per_reactor(stamps: Iterable[Stamp]) -> tuple[Stamp, ...]:
    """Keep the first stamp of each (anonymous_id, type) pair, in input order."""
    seen: set[tuple[str, str]] = set()
    kept: list[Stamp] = []
    dropped = 0
    for stamp in stamps:
        key = (stamp.anonymous_id, stamp.type)
        if key in seen:
            dropped += 1
            continue
        seen.add(key)
        kept.append(stamp)
    if dropped:
        logger.debug(f"Dropped {dropped} repeated stamps from the same reactor")
    return tuple(kept)
