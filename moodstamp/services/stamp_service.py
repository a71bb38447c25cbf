"""
stamp_service.py - Stamp service layer
Single responsibility: orchestrate stamp aggregation and enforce stamp policies.
"""
import uuid
from collections.abc import Sequence

from moodstamp.config import DEDUP_BY_REACTOR, StampConfigMap, get_stamp_config
from moodstamp.domain.aggregation import aggregate_cached, default_aggregator
from moodstamp.domain.models import AggregatedStamp, Stamp
from moodstamp.domain.policies import one_stamp_per_reactor

StampSummary = dict[str, dict[str, int | bool | str | list[str]]]


def _ensure_stamp_allowed(stamp_type: str, config: StampConfigMap) -> None:
    if stamp_type not in config:
        raise ValueError(f"Unsupported stamp: {stamp_type}")


def _apply_policy(stamps: Sequence[Stamp], dedup: bool | None) -> Sequence[Stamp]:
    if dedup is None:
        dedup = DEDUP_BY_REACTOR
    if dedup:
        return one_stamp_per_reactor(stamps)
    return stamps


def get_aggregated(
    stamps: Sequence[Stamp], dedup: bool | None = None
) -> tuple[AggregatedStamp, ...]:
    return aggregate_cached(_apply_policy(stamps, dedup))


def invalidate(stamps: Sequence[Stamp], dedup: bool | None = None) -> bool:
    """Drop the cached groups that get_aggregated stored for these stamps."""
    return default_aggregator().invalidate(_apply_policy(stamps, dedup))


def summarize(
    stamps: Sequence[Stamp], current_anonymous_id: str | None, dedup: bool | None = None
) -> StampSummary:
    summary: StampSummary = {}
    for group in get_aggregated(stamps, dedup):
        summary[group.type] = {
            "count": group.count,
            "reacted": group.reacted_by(current_anonymous_id),
            "users": list(group.reactors),
            "native": group.native,
        }
    return summary


def new_stamp(
    stamp_type: str, anonymous_id: str, config: StampConfigMap | None = None
) -> Stamp:
    config = config if config is not None else get_stamp_config()
    _ensure_stamp_allowed(stamp_type, config)
    return Stamp(
        id=str(uuid.uuid4()),
        type=stamp_type,
        native=config[stamp_type].glyph,
        anonymous_id=anonymous_id,
    )


def toggle_stamp(
    stamps: Sequence[Stamp],
    stamp_type: str,
    anonymous_id: str,
    config: StampConfigMap | None = None,
) -> tuple[Stamp, ...]:
    """
    Remove the reactor's stamps of this type if any, else add one.

    Only adding is checked against the stamp config, so a reactor can still
    take back a stamp whose type has since left the config.
    """
    remaining = tuple(
        s for s in stamps if not (s.type == stamp_type and s.anonymous_id == anonymous_id)
    )
    if len(remaining) != len(stamps):
        return remaining
    return (*stamps, new_stamp(stamp_type, anonymous_id, config))
