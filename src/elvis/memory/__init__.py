"""Working memory — a small, capacity-bounded set of salient session facts.

Layout:
    entry.py     MemoryEntry + Category (the value object)
    scoring.py   score(entry, now): age decay, access bonus, priority, category
    store.py     WorkingMemory: insert-with-eviction, access, list, clear
    views.py     Human-readable summaries for tool / CLI output
    archive.py   On-evict sinks (log notification, markdown archive)

Nothing here is persisted: a WorkingMemory lives as long as its session.
"""

from elvis.memory.entry import Category, MemoryEntry
from elvis.memory.scoring import score
from elvis.memory.store import WorkingMemory

__all__ = ["Category", "MemoryEntry", "WorkingMemory", "score"]
