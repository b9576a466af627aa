"""Tests for the working-memory text views."""

from __future__ import annotations

from elvis.memory.store import WorkingMemory
from elvis.memory.views import (
    DEFAULT_ICON,
    format_evicted,
    format_listing,
    format_summary,
    preview,
)


class TestPreview:
    def test_short_content_unchanged(self):
        assert preview("short") == "short"

    def test_long_content_cut(self):
        text = "x" * 80
        assert preview(text) == "x" * 50 + "..."

    def test_exact_limit(self):
        assert preview("y" * 50) == "y" * 50


class TestSummary:
    def test_empty(self, memory: WorkingMemory):
        assert format_summary(memory) == "🧠 Working Memory (0/7 slots):"

    def test_lines_in_store_order(self, memory: WorkingMemory):
        low = memory.insert("Result from task 2", "result", 2)
        memory.insert("Use llama3.2 for quick responses", "decision", 7)
        memory.access(low.id)
        lines = format_summary(memory).splitlines()
        assert lines[0] == "🧠 Working Memory (2/7 slots):"
        assert lines[1] == "1. 📊 [RESULT] Result from task 2 (accessed 1x)"
        assert lines[2] == "2. 🎯 [DECISION] Use llama3.2 for quick responses (accessed 0x)"

    def test_unknown_category_icon(self, memory: WorkingMemory):
        memory.insert("odd one", "musing", 3)
        assert f"{DEFAULT_ICON} [MUSING] odd one" in format_summary(memory)

    def test_long_content_previewed(self, memory: WorkingMemory):
        memory.insert("z" * 120, "pattern", 4)
        line = format_summary(memory).splitlines()[1]
        assert "z" * 50 + "..." in line
        assert "z" * 51 not in line


class TestListing:
    def test_empty(self, memory: WorkingMemory):
        assert format_listing(memory) == "No memories stored yet."

    def test_details(self, memory: WorkingMemory):
        entry = memory.insert("Use deepseek-r1 for analysis", "decision", 7)
        text = format_listing(memory)
        assert text.startswith("Working Memory Contents:")
        assert "1. [decision] Use deepseek-r1 for analysis" in text
        assert f"ID: {entry.id}" in text
        assert "Priority: 7/7, Value: 0.800, Accessed: 0x" in text

    def test_full_content_shown(self, memory: WorkingMemory):
        memory.insert("w" * 150, "reference", 3)
        assert "w" * 150 in format_listing(memory)


def test_format_evicted(memory: WorkingMemory):
    entry = memory.insert("gone", "task", 2)
    assert format_evicted(entry) == "🗑️ Evicted: [task] gone"
