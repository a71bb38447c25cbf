import pytest

from moodstamp.domain.aggregation import default_aggregator
from moodstamp.domain.models import Stamp

GLYPHS = {"happy": "😊", "sad": "😢"}


@pytest.fixture
def make_stamp():
    def _make(
        stamp_id: str,
        stamp_type: str = "happy",
        anonymous_id: str = "user1",
        native: str | None = None,
    ) -> Stamp:
        return Stamp(
            id=stamp_id,
            type=stamp_type,
            native=native if native is not None else GLYPHS.get(stamp_type, "❓"),
            anonymous_id=anonymous_id,
        )

    return _make


@pytest.fixture
def mock_stamps(make_stamp) -> list[Stamp]:
    return [
        make_stamp("1", "happy", "user1"),
        make_stamp("2", "happy", "user2"),
        make_stamp("3", "sad", "user1"),
    ]


@pytest.fixture
def fresh_default_aggregator():
    default_aggregator().clear()
    yield
    default_aggregator().clear()
