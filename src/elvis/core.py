"""ELVIS session — the explicitly owned context around one working memory.

Each session owns its own WorkingMemory, so several sessions (or tests) can
run side by side without sharing hidden state. The task-delegation and
screen-analysis layers write into memory only through the helpers here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from elvis.config import ElvisConfig
from elvis.memory.archive import MarkdownArchive, log_important_eviction
from elvis.memory.entry import Category
from elvis.memory.store import WorkingMemory
from elvis.tools.memory_tools import MEMORY_TOOL_NAME, get_memory_tools

if TYPE_CHECKING:
    from elvis.memory.entry import MemoryEntry

logger = logging.getLogger(__name__)

TASK_RESULT_PRIORITY = 3
SCREEN_REQUEST_PRIORITY = 6
SCREEN_RESULT_PRIORITY = 4


class ElvisSession:
    """One agent session: a working memory plus the tools that reach it."""

    def __init__(
        self,
        config: ElvisConfig | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config or ElvisConfig()
        on_evict = (
            MarkdownArchive(self.config.memory.archive_dir, clock=clock)
            if self.config.memory.archive_dir
            else log_important_eviction
        )
        self.memory = WorkingMemory(
            self.config.memory.capacity, clock=clock, on_evict=on_evict
        )
        self.tools = get_memory_tools(self.memory)
        logger.info("Session started with %d memory slots", self.memory.capacity)

    def call_memory_tool(self, **args) -> str:
        """Run an ``elvis_memory`` tool call with raw tool arguments."""
        return self.tools[MEMORY_TOOL_NAME](**args)

    def slot_status(self) -> str:
        return f"slot {self.memory.size()}/{self.memory.capacity}"

    # ── Collaborator write paths ─────────────────────────────

    def remember_task_result(
        self, task: str, result: str, model: str, duration_ms: float
    ) -> MemoryEntry:
        """Store a short digest of a completed delegated task."""
        seconds = f"{duration_ms / 1000:.1f}"
        return self.memory.insert(
            f"{task[:100]} → {result[:50]}...",
            Category.RESULT,
            TASK_RESULT_PRIORITY,
            [model, "elvis", f"duration:{seconds}s"],
            source="delegate",
        )

    def remember_screen_request(self, prompt: str, model: str) -> MemoryEntry:
        """Store the intent of a screen analysis before it runs."""
        return self.memory.insert(
            f"Screen analysis: {prompt}",
            Category.TASK,
            SCREEN_REQUEST_PRIORITY,
            ["screen", "vision", model],
            source="screen",
        )

    def remember_screen_analysis(self, analysis: str, model: str) -> MemoryEntry:
        """Store the outcome of a screen analysis."""
        return self.memory.insert(
            f"Screen analysis result: {analysis[:200]}...",
            Category.RESULT,
            SCREEN_RESULT_PRIORITY,
            ["screen", "vision", model, "analysis"],
            source="screen",
        )
