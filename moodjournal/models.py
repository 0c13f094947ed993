from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from moodjournal.utils.constants import DAY_LABELS


class Mood(Enum):
    SAD = "sad"
    ANXIOUS = "anxious"
    NEUTRAL = "neutral"
    CALM = "calm"
    HAPPY = "happy"
    EXCITED = "excited"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_label(cls, label: Any) -> Mood:
        """Look up a free-form label; anything outside the vocabulary is UNRECOGNIZED."""
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            return cls.UNRECOGNIZED


class Category(Enum):
    PERSONAL = "personal"
    PROFESSIONAL = "professional"

    @classmethod
    def from_label(cls, label: Any) -> Category | None:
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            return None


class Trend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


@dataclass(frozen=True)
class MediaItem:
    id: str
    type: str
    url: str


@dataclass(frozen=True)
class JournalEntry:
    created_at: Any
    mood: str = ""
    category: str = ""
    id: str = ""
    title: str = ""
    content: str = ""
    tags: tuple[str, ...] = ()
    location: str | None = None
    is_protected: bool = False
    media: tuple[MediaItem, ...] = ()
    updated_at: Any = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> JournalEntry:
        """Build an entry from the camelCase journal API payload.

        Malformed media items and tags are dropped rather than raised on.
        """
        raw_media = data.get("media")
        raw_tags = data.get("tags")
        media = tuple(
            MediaItem(
                id=m.get("_id", ""),
                type=m.get("type", ""),
                url=m.get("url", ""),
            )
            for m in (raw_media if isinstance(raw_media, (list, tuple)) else ())
            if isinstance(m, Mapping)
        )
        tags = tuple(raw_tags) if isinstance(raw_tags, (list, tuple)) else ()
        return cls(
            created_at=data.get("createdAt"),
            mood=data.get("mood", ""),
            category=data.get("category", ""),
            id=data.get("_id", ""),
            title=data.get("title", ""),
            content=data.get("content", ""),
            tags=tags,
            location=data.get("location"),
            is_protected=bool(data.get("isProtected", False)),
            media=media,
            updated_at=data.get("updatedAt"),
        )


@dataclass(frozen=True)
class WeeklyMoodData:
    professional_mood: tuple[float | None, ...]
    personal_mood: tuple[float | None, ...]
    days: tuple[str, ...] = DAY_LABELS

    def for_category(self, category: Category) -> tuple[float | None, ...]:
        if category is Category.PROFESSIONAL:
            return self.professional_mood
        return self.personal_mood


@dataclass(frozen=True)
class TrendResult:
    trend: Trend
    change: float
    emoji: str = field(default="", compare=False)
    color: str = field(default="", compare=False)


@dataclass(frozen=True)
class CategoryCounts:
    professional: int = 0
    personal: int = 0
    with_mood: int = 0
