"""Memory entry — one remembered fact plus its usage metadata."""

from __future__ import annotations

import math
import secrets
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Iterable

MIN_PRIORITY = 1
MAX_PRIORITY = 7
DEFAULT_PRIORITY = 5
MAX_CONTENT_CHARS = 200


class Category(str, Enum):
    """Closed set of memory categories. Other labels are stored but score as unknown."""

    DECISION = "decision"
    INSIGHT = "insight"
    PATTERN = "pattern"
    REFERENCE = "reference"
    TASK = "task"
    RESULT = "result"

    @classmethod
    def parse(cls, value: str | Category) -> Category | None:
        """Return the matching member, or None for an unrecognized label."""
        try:
            return cls(value)
        except ValueError:
            return None


def clamp_priority(priority: object) -> int:
    """Clamp (and round) a priority into [MIN_PRIORITY, MAX_PRIORITY].

    Anything that is not a number (or a numeric string), and NaN, falls back
    to DEFAULT_PRIORITY. Infinities land on the nearest bound.
    """
    try:
        value = float(priority)
    except (TypeError, ValueError):
        return DEFAULT_PRIORITY
    if math.isnan(value):
        return DEFAULT_PRIORITY
    return int(round(min(max(value, MIN_PRIORITY), MAX_PRIORITY)))


def new_entry_id(now: datetime) -> str:
    return f"wm_{int(now.timestamp() * 1000)}_{secrets.token_hex(3)}"


@dataclass
class MemoryEntry:
    """A single working-memory slot.

    Only ``last_accessed_at`` and ``access_count`` change after creation,
    and only through :meth:`touch`.
    """

    id: str
    content: str
    priority: int
    category: str
    tags: frozenset[str]
    created_at: datetime
    last_accessed_at: datetime
    access_count: int = 0
    source: str = "manual"

    @classmethod
    def create(
        cls,
        content: str,
        category: str | Category,
        priority: float = DEFAULT_PRIORITY,
        tags: Iterable[str] | str | None = (),
        *,
        now: datetime,
        entry_id: str | None = None,
        source: str = "manual",
    ) -> MemoryEntry:
        """Build a normalized entry: priority clamped, content truncated."""
        if isinstance(category, Category):
            category = category.value
        if tags is None:
            tags = ()
        elif isinstance(tags, str):
            tags = [tags]
        return cls(
            id=entry_id or new_entry_id(now),
            content=str(content)[:MAX_CONTENT_CHARS],
            priority=clamp_priority(priority),
            category=str(category),
            tags=frozenset(str(t) for t in tags),
            created_at=now,
            last_accessed_at=now,
            source=source,
        )

    @property
    def known_category(self) -> Category | None:
        return Category.parse(self.category)

    def touch(self, now: datetime) -> None:
        """Record one access."""
        self.last_accessed_at = now
        self.access_count += 1

    def to_dict(self) -> dict[str, Any]:
        """Serialise to plain JSON-friendly types."""
        return {
            "id": self.id,
            "content": self.content,
            "priority": self.priority,
            "category": self.category,
            "tags": sorted(self.tags),
            "created_at": self.created_at.isoformat(timespec="seconds"),
            "last_accessed_at": self.last_accessed_at.isoformat(timespec="seconds"),
            "access_count": self.access_count,
            "source": self.source,
        }
