"""Tests for the ELVIS session context."""

from __future__ import annotations

from pathlib import Path

import pytest

from elvis.config import ElvisConfig, MemoryConfig
from elvis.core import ElvisSession
from elvis.memory.archive import MarkdownArchive


@pytest.fixture
def session(clock) -> ElvisSession:
    return ElvisSession(clock=clock)


class TestSession:
    def test_default_capacity(self, session: ElvisSession):
        assert session.memory.capacity == 7
        assert session.slot_status() == "slot 0/7"

    def test_capacity_from_config(self, clock):
        session = ElvisSession(ElvisConfig(memory=MemoryConfig(capacity=2)), clock=clock)
        assert session.memory.capacity == 2

    def test_sessions_are_independent(self, clock):
        one, two = ElvisSession(clock=clock), ElvisSession(clock=clock)
        one.memory.insert("only here", "task")
        assert one.memory.size() == 1
        assert two.memory.size() == 0

    def test_call_memory_tool(self, session: ElvisSession):
        text = session.call_memory_tool(action="add", content="fact", category="insight")
        assert "Added to working memory" in text
        assert session.slot_status() == "slot 1/7"

    def test_archive_wired_from_config(self, tmp_path: Path, clock):
        config = ElvisConfig(memory=MemoryConfig(capacity=1, archive_dir=tmp_path / "arch"))
        session = ElvisSession(config, clock=clock)
        session.memory.insert("a decision", "decision", 7)
        session.memory.insert("something else", "task", 5)
        archive = MarkdownArchive(tmp_path / "arch")
        assert len(archive.entries()) == 1


class TestCollaboratorWrites:
    def test_task_result(self, session: ElvisSession):
        entry = session.remember_task_result(
            "Summarize the report", "The report says things", "llama3.2", 31_400
        )
        assert entry.content == "Summarize the report → The report says things..."
        assert entry.category == "result"
        assert entry.priority == 3
        assert entry.tags == frozenset({"llama3.2", "elvis", "duration:31.4s"})

    def test_task_result_truncates_parts(self, session: ElvisSession):
        entry = session.remember_task_result("t" * 150, "r" * 80, "mixtral", 1000)
        assert entry.content == "t" * 100 + " → " + "r" * 50 + "..."

    def test_screen_request(self, session: ElvisSession):
        entry = session.remember_screen_request("What is open?", "llava")
        assert entry.content == "Screen analysis: What is open?"
        assert entry.category == "task"
        assert entry.priority == 6
        assert entry.tags == frozenset({"screen", "vision", "llava"})

    def test_screen_analysis_fits_content_limit(self, session: ElvisSession):
        entry = session.remember_screen_analysis("a" * 500, "llava")
        assert entry.category == "result"
        assert entry.priority == 4
        assert len(entry.content) == 200
        assert entry.content.startswith("Screen analysis result: aaa")
        assert "analysis" in entry.tags
