"""Working memory store — a fixed number of slots with value-based eviction.

When every slot is taken, inserting a new entry first evicts the live entry
with the lowest score (ties go to the earliest inserted), so the store never
holds more than ``capacity`` entries, not even transiently.

A WorkingMemory is single-owner: callers that share one across tasks or
threads must serialize mutating calls themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from elvis.memory.archive import log_important_eviction
from elvis.memory.entry import DEFAULT_PRIORITY, Category, MemoryEntry, new_entry_id
from elvis.memory.scoring import score as score_entry

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 7

Clock = Callable[[], datetime]
EvictCallback = Callable[[MemoryEntry, float], None]


class WorkingMemory:
    """Capacity-bounded, multi-factor scored collection of memory entries."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        clock: Clock = datetime.now,
        on_evict: EvictCallback | None = log_important_eviction,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._clock = clock
        self._on_evict = on_evict
        self._slots: list[MemoryEntry] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, entry_id: object) -> bool:
        return any(m.id == entry_id for m in self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self._capacity

    # ── Scoring ──────────────────────────────────────────────

    def score(self, entry: MemoryEntry, now: datetime | None = None) -> float:
        """Current value score of ``entry`` (for diagnostics and eviction)."""
        return score_entry(entry, now if now is not None else self._clock())

    # ── Mutations ────────────────────────────────────────────

    def insert(
        self,
        content: str,
        category: str | Category,
        priority: float = DEFAULT_PRIORITY,
        tags: Iterable[str] = (),
        *,
        source: str = "manual",
    ) -> MemoryEntry:
        """Add a new entry, evicting the lowest-value one first if full."""
        entry, _ = self.insert_evicting(content, category, priority, tags, source=source)
        return entry

    def insert_evicting(
        self,
        content: str,
        category: str | Category,
        priority: float = DEFAULT_PRIORITY,
        tags: Iterable[str] = (),
        *,
        source: str = "manual",
    ) -> tuple[MemoryEntry, MemoryEntry | None]:
        """Like :meth:`insert`, but also return the entry evicted to make room."""
        evicted = self.evict_one() if self.is_full() else None

        now = self._clock()
        entry = MemoryEntry.create(
            content,
            category,
            priority,
            tags,
            now=now,
            entry_id=self._fresh_id(now),
            source=source,
        )
        self._slots.append(entry)
        logger.debug(
            "Inserted %s [%s] priority=%d (%d/%d)",
            entry.id, entry.category, entry.priority, len(self._slots), self._capacity,
        )
        return entry, evicted

    def evict_one(self) -> MemoryEntry | None:
        """Remove and return the lowest-scoring entry, or None when empty."""
        if not self._slots:
            return None

        now = self._clock()
        scores = [score_entry(m, now) for m in self._slots]
        # min() keeps the first of equal keys, so ties evict the earliest slot
        index = min(range(len(scores)), key=scores.__getitem__)
        evicted = self._slots.pop(index)
        logger.info(
            "Evicted %s [%s] score=%.3f", evicted.id, evicted.category, scores[index]
        )

        if self._on_evict is not None:
            self._on_evict(evicted, scores[index])
        return evicted

    def access(self, entry_id: str) -> MemoryEntry | None:
        """Mark an entry as used. Unknown ids return None and change nothing."""
        entry = self.get(entry_id)
        if entry is None:
            logger.debug("Access to unknown memory %s", entry_id)
            return None
        entry.touch(self._clock())
        return entry

    def clear(self) -> int:
        """Drop every entry. Returns how many were removed."""
        count = len(self._slots)
        self._slots = []
        logger.debug("Cleared %d memories", count)
        return count

    # ── Reads ────────────────────────────────────────────────

    def get(self, entry_id: str) -> MemoryEntry | None:
        """Look up a live entry without counting it as an access."""
        for entry in self._slots:
            if entry.id == entry_id:
                return entry
        return None

    def list_entries(
        self, with_score: bool = False
    ) -> list[MemoryEntry] | list[tuple[MemoryEntry, float]]:
        """Entries in slot order; with ``with_score``, paired with a fresh score."""
        if not with_score:
            return list(self._slots)
        now = self._clock()
        return [(m, score_entry(m, now)) for m in self._slots]

    # ── Internals ────────────────────────────────────────────

    def _fresh_id(self, now: datetime) -> str:
        entry_id = new_entry_id(now)
        while entry_id in self:
            entry_id = new_entry_id(now)
        return entry_id
