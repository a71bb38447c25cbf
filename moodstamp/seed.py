"""
seed.py - デモ用の投稿とスタンプ
Single responsibility: supply deterministic sample posts to the demo app.
"""
from moodstamp.config import STAMP_CONFIG
from moodstamp.domain.models import Post, Stamp


def _stamp(stamp_id: str, stamp_type: str, anonymous_id: str) -> Stamp:
    return Stamp(
        id=stamp_id,
        type=stamp_type,
        native=STAMP_CONFIG[stamp_type].glyph,
        anonymous_id=anonymous_id,
    )


def seed_posts() -> list[Post]:
    return [
        Post(
            id="post-1",
            content="今日は晴れて気持ちがいい一日でした！",
            emotion="喜び",
            anonymous_id="seed-a",
            created_at="2024-05-01T09:30:00",
            stamps=(
                _stamp("s1", "smile", "seed-b"),
                _stamp("s2", "love", "seed-c"),
                _stamp("s3", "smile", "seed-c"),
            ),
        ),
        Post(
            id="post-2",
            content="友達と遊園地に行って楽しかった！",
            emotion="楽しい",
            anonymous_id="seed-b",
            created_at="2024-05-02T18:05:00",
            stamps=(
                _stamp("s4", "thanks", "seed-a"),
                _stamp("s5", "thanks", "seed-a"),
            ),
        ),
        Post(
            id="post-3",
            content="大切なものをなくしてしまった...",
            emotion="悲しみ",
            anonymous_id="seed-c",
            created_at="2024-05-03T22:41:00",
            stamps=(
                _stamp("s6", "cry", "seed-a"),
                _stamp("s7", "sad", "seed-b"),
                _stamp("s8", "cry", "seed-b"),
            ),
        ),
    ]
