"""Value scoring — how much a working-memory entry is still worth keeping.

Four signals, each roughly in [0, 1], summed with fixed weights:

    age decay   0.3   exp(-age / 1h), age measured from last access
    access      0.2   log(access_count + 1), unbounded above
    priority    0.3   priority / 7
    category    0.2   CATEGORY_WEIGHTS, DEFAULT_CATEGORY_WEIGHT otherwise

Scores are only meaningful relative to each other and are recomputed on
every call; nothing is cached.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import TYPE_CHECKING

from elvis.memory.entry import MAX_PRIORITY, Category

if TYPE_CHECKING:
    from elvis.memory.entry import MemoryEntry

AGE_WEIGHT = 0.3
ACCESS_WEIGHT = 0.2
PRIORITY_WEIGHT = 0.3
CATEGORY_WEIGHT = 0.2

AGE_DECAY_MS = 60 * 60 * 1000

CATEGORY_WEIGHTS: dict[Category, float] = {
    Category.DECISION: 1.0,
    Category.INSIGHT: 0.9,
    Category.PATTERN: 0.8,
    Category.REFERENCE: 0.6,
    Category.TASK: 0.5,
    Category.RESULT: 0.4,
}
DEFAULT_CATEGORY_WEIGHT = 0.5


def category_weight(category: str | Category) -> float:
    """Weight for a category label; unknown labels get DEFAULT_CATEGORY_WEIGHT."""
    known = Category.parse(category)
    if known is None:
        return DEFAULT_CATEGORY_WEIGHT
    return CATEGORY_WEIGHTS[known]


def age_decay(entry: MemoryEntry, now: datetime) -> float:
    age_ms = (now - entry.last_accessed_at).total_seconds() * 1000
    return math.exp(-age_ms / AGE_DECAY_MS)


def access_bonus(entry: MemoryEntry) -> float:
    return math.log(entry.access_count + 1)


def score(entry: MemoryEntry, now: datetime) -> float:
    """Weighted sum of the four signals for ``entry`` evaluated at ``now``."""
    return (
        age_decay(entry, now) * AGE_WEIGHT
        + access_bonus(entry) * ACCESS_WEIGHT
        + (entry.priority / MAX_PRIORITY) * PRIORITY_WEIGHT
        + category_weight(entry.category) * CATEGORY_WEIGHT
    )
