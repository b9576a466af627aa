"""The ``elvis_memory`` tool — agent-facing access to working memory.

``get_memory_tools`` returns plain callables that can be registered as MCP
tools or called directly. Every call returns display text; bad arguments
come back as ``Error: ...`` text rather than exceptions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from elvis.memory.entry import DEFAULT_PRIORITY, MAX_PRIORITY, MIN_PRIORITY, Category
from elvis.memory.views import format_evicted, format_listing, format_summary

if TYPE_CHECKING:
    from elvis.memory.store import WorkingMemory

logger = logging.getLogger(__name__)

MEMORY_TOOL_NAME = "elvis_memory"
MEMORY_ACTIONS = ("list", "add", "access", "clear", "summary")

MEMORY_TOOL_SCHEMA: dict[str, Any] = {
    "name": MEMORY_TOOL_NAME,
    "description": "Manage working memory for ELVIS tasks",
    "inputSchema": {
        "type": "object",
        "properties": {
            "action": {
                "type": "string",
                "description": "Memory action to perform",
                "enum": list(MEMORY_ACTIONS),
            },
            "content": {
                "type": "string",
                "description": "Content to store (for add action)",
            },
            "category": {
                "type": "string",
                "description": "Memory category",
                "enum": [c.value for c in Category],
            },
            "priority": {
                "type": "number",
                "description": f"Priority {MIN_PRIORITY}-{MAX_PRIORITY} (higher = more important)",
            },
            "memory_id": {
                "type": "string",
                "description": "Memory ID (for access action)",
            },
        },
        "required": ["action"],
    },
}

MEMORY_HELP = """\
# elvis_memory - Working Memory Management

## Purpose:
Manage a small fixed-size working memory that lives for the current session.

## Parameters:
- **action** (required): Operation to perform
  - list: Show all memories with their current value scores
  - add: Store new memory
  - access: Retrieve and update access count
  - clear: Remove all memories
  - summary: Get formatted summary
- **content** (for add): Text to store (first 200 characters are kept)
- **category** (for add): Type of memory
  - decision: Important choices (kept longest)
  - insight: Discoveries and learnings
  - pattern: Recurring themes
  - reference: File paths, IDs
  - task: Task-related info
  - result: Task results (lowest priority)
- **priority** (for add): 1-7, higher = more important (default 5)
- **memory_id** (for access): ID to retrieve

## Memory Management:
- When all slots are full, the lowest value memory is evicted
- Value based on: age since last access, access count, priority, category
- Important memories (decisions, insights) are archived before deletion
"""


def get_memory_tools(store: WorkingMemory) -> dict[str, Callable[..., str]]:
    """Return a dict of tool_name -> callable for working-memory operations."""

    def list_memories() -> str:
        """Detailed listing of every slot with id, priority and value score."""
        return format_listing(store)

    def add_memory(
        content: str | None = None,
        category: str | None = None,
        priority: float | None = None,
        tags: list[str] | None = None,
    ) -> str:
        """Store a new memory, evicting the lowest-value one if all slots are full."""
        if not content or not category:
            return "Error: content and category are required for add action"

        entry, evicted = store.insert_evicting(
            content,
            category,
            priority if priority is not None else DEFAULT_PRIORITY,
            tags if tags is not None else ["manual"],
        )
        response = (
            f"✅ Added to working memory:\n"
            f"ID: {entry.id}\n"
            f"Category: {entry.category}\n"
            f"Priority: {entry.priority}"
        )
        if evicted is not None:
            response += f"\n\n{format_evicted(evicted)}"
        return response

    def access_memory(memory_id: str | None = None) -> str:
        """Read a memory by id and bump its access count."""
        if not memory_id:
            return "Error: memory_id required for access action"
        entry = store.access(memory_id)
        if entry is None:
            return f"Memory not found: {memory_id}"
        return f"Accessed memory:\n{entry.content}\n\nAccess count: {entry.access_count}"

    def clear_memories() -> str:
        """Remove every memory."""
        count = store.clear()
        return f"Cleared {count} memories from working memory."

    def memory_summary() -> str:
        """One-line-per-slot summary."""
        return format_summary(store)

    def elvis_memory(action: str = "summary", **kwargs: Any) -> str:
        """Dispatch an ``elvis_memory`` tool call. Unknown actions show the summary."""
        if action == "list":
            return list_memories()
        if action == "add":
            return add_memory(
                content=kwargs.get("content"),
                category=kwargs.get("category"),
                priority=kwargs.get("priority"),
                tags=kwargs.get("tags"),
            )
        if action == "access":
            return access_memory(kwargs.get("memory_id"))
        if action == "clear":
            return clear_memories()
        if action != "summary":
            logger.debug("Unknown memory action %r, falling back to summary", action)
        return memory_summary()

    return {
        MEMORY_TOOL_NAME: elvis_memory,
        "list_memories": list_memories,
        "add_memory": add_memory,
        "access_memory": access_memory,
        "clear_memories": clear_memories,
        "memory_summary": memory_summary,
    }
