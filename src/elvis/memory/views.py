"""Read-only text views of a WorkingMemory, in slot order."""

from __future__ import annotations

from typing import TYPE_CHECKING

from elvis.memory.entry import MAX_PRIORITY, Category

if TYPE_CHECKING:
    from elvis.memory.entry import MemoryEntry
    from elvis.memory.store import WorkingMemory

CATEGORY_ICONS: dict[Category, str] = {
    Category.DECISION: "🎯",
    Category.INSIGHT: "💡",
    Category.PATTERN: "🔄",
    Category.REFERENCE: "📎",
    Category.TASK: "✓",
    Category.RESULT: "📊",
}
DEFAULT_ICON = "📝"

PREVIEW_CHARS = 50


def icon_for(entry: MemoryEntry) -> str:
    return CATEGORY_ICONS.get(entry.known_category, DEFAULT_ICON)


def preview(content: str, limit: int = PREVIEW_CHARS) -> str:
    """First ``limit`` characters, with an ellipsis when cut."""
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


def format_summary(store: WorkingMemory) -> str:
    """Compact one-line-per-slot summary."""
    lines = [f"🧠 Working Memory ({store.size()}/{store.capacity} slots):"]
    for i, entry in enumerate(store.list_entries(), start=1):
        lines.append(
            f"{i}. {icon_for(entry)} [{entry.category.upper()}] {preview(entry.content)} "
            f"(accessed {entry.access_count}x)"
        )
    return "\n".join(lines)


def format_listing(store: WorkingMemory) -> str:
    """Detailed listing with ids and current scores."""
    scored = store.list_entries(with_score=True)
    if not scored:
        return "No memories stored yet."

    parts = ["Working Memory Contents:\n"]
    for i, (entry, value) in enumerate(scored, start=1):
        parts.append(
            f"{i}. [{entry.category}] {entry.content}\n"
            f"   ID: {entry.id}\n"
            f"   Priority: {entry.priority}/{MAX_PRIORITY}, Value: {value:.3f}, "
            f"Accessed: {entry.access_count}x\n"
        )
    return "\n".join(parts)


def format_evicted(entry: MemoryEntry) -> str:
    return f"🗑️ Evicted: [{entry.category}] {preview(entry.content)}"
