"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
import uuid
from datetime import datetime

from moodstamp.config import STAMP_COUNT_CAP


def current_anonymous_id() -> str:
    return uuid.uuid4().hex


def format_datetime(iso_str: str | None) -> str:
    """ISO 8601 string to "YYYY-MM-DD HH:MM"; fallback to raw on error."""
    try:
        dt = datetime.fromisoformat(iso_str)
        return dt.strftime("%Y-%m-%d %H:%M")
    except (ValueError, TypeError):
        return iso_str or ""


def format_count(count: int) -> str:
    if count > STAMP_COUNT_CAP:
        return f"{STAMP_COUNT_CAP}+"
    return str(count)


def reactor_tooltip(label: str, reactors: tuple[str, ...] | list[str]) -> str:
    n = len(reactors)
    return f"{label} ・ {n}人" if n else label
