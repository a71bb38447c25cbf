"""
models.py - Domain models
Single responsibility: typed containers for stamps, posts and their rollups.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class StampType(str, Enum):
    THANKS = "thanks"
    LOVE = "love"
    SMILE = "smile"
    CRY = "cry"
    SAD = "sad"
    SHOCK = "shock"
    HAPPY = "happy"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "StampType":
        """Member for value; kinds outside the set map to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Stamp:
    id: str
    type: str
    native: str
    anonymous_id: str

    def __getitem__(self, key):
        return getattr(self, key)

    @property
    def kind(self) -> StampType:
        return StampType.parse(self.type)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stamp":
        """Build from the client payload shape (camelCase anonymousId)."""
        anonymous_id = data["anonymousId"] if "anonymousId" in data else data["anonymous_id"]
        stamp_id = str(data["id"])
        stamp_type = str(data["type"])
        if not stamp_id or not stamp_type:
            raise ValueError(f"Stamp requires non-empty id and type: {data!r}")
        return cls(
            id=stamp_id,
            type=stamp_type,
            native=data["native"],
            anonymous_id=str(anonymous_id),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "type": self.type,
            "native": self.native,
            "anonymousId": self.anonymous_id,
        }


@dataclass(frozen=True)
class AggregatedStamp:
    type: str
    count: int
    stamps: tuple[Stamp, ...]

    def __getitem__(self, key):
        return getattr(self, key)

    @property
    def native(self) -> str:
        # first-seen glyph; mixed glyphs within a type are not checked
        return self.stamps[0].native if self.stamps else ""

    @property
    def reactors(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(s.anonymous_id for s in self.stamps))

    def reacted_by(self, anonymous_id: str | None) -> bool:
        if not anonymous_id:
            return False
        return any(s.anonymous_id == anonymous_id for s in self.stamps)


@dataclass(frozen=True)
class EmotionTag:
    name: str
    emoji: str


EMOTION_TAGS: tuple[EmotionTag, ...] = (
    EmotionTag("怒り", "😠"),
    EmotionTag("悲しみ", "😢"),
    EmotionTag("不安", "😰"),
    EmotionTag("喜び", "😊"),
    EmotionTag("落ち込み", "😞"),
    EmotionTag("楽しい", "😆"),
)


def find_emotion(name: str) -> EmotionTag | None:
    return next((e for e in EMOTION_TAGS if e.name == name), None)


@dataclass
class Post:
    content: str
    emotion: str
    anonymous_id: str
    created_at: str | None = None
    stamps: tuple[Stamp, ...] = field(default_factory=tuple)
    id: Optional[str] = None

    def __getitem__(self, key):
        return getattr(self, key)
