"""Tests for the working-memory REPL."""

from __future__ import annotations

import io

import pytest

from elvis.cli import USAGE, MemoryREPL, parse_command
from elvis.core import ElvisSession


class TestParseCommand:
    def test_add(self):
        assert parse_command("add decision 7 Use llama3.2 for speed") == {
            "action": "add",
            "category": "decision",
            "priority": 7.0,
            "content": "Use llama3.2 for speed",
        }

    def test_add_without_priority(self):
        args = parse_command("add insight sky is blue")
        assert args["priority"] is None
        assert args["content"] == "sky is blue"

    def test_add_missing_parts(self):
        assert parse_command("add task") == {"action": "add"}

    def test_access(self):
        assert parse_command("access wm_1") == {"action": "access", "memory_id": "wm_1"}
        assert parse_command("access") == {"action": "access", "memory_id": None}

    @pytest.mark.parametrize("word", ["list", "clear", "summary", "LIST"])
    def test_simple(self, word):
        assert parse_command(word) == {"action": word.lower()}

    def test_unknown(self):
        assert parse_command("dance") is None
        assert parse_command("   ") is None

    def test_unbalanced_quotes(self):
        assert parse_command('add task 3 "oops')["content"] == '"oops'


class TestMemoryREPL:
    def test_session(self, clock):
        stdin = io.StringIO("add decision 7 keep this\nsummary\nbogus\nexit\n")
        stdout = io.StringIO()
        session = ElvisSession(clock=clock)
        MemoryREPL(session, stdin=stdin, stdout=stdout).run()

        output = stdout.getvalue()
        assert "Added to working memory" in output
        assert "1. 🎯 [DECISION] keep this (accessed 0x)" in output
        assert USAGE in output
        assert output.rstrip().endswith("Bye!")
        assert session.memory.size() == 1

    def test_eof_exits(self, clock):
        stdout = io.StringIO()
        MemoryREPL(ElvisSession(clock=clock), stdin=io.StringIO(""), stdout=stdout).run()
        assert "Bye!" in stdout.getvalue()

    def test_help(self, clock):
        repl = MemoryREPL(ElvisSession(clock=clock), stdout=io.StringIO())
        assert "elvis_memory" in repl.handle("help")

    def test_non_finite_priority_keeps_session_alive(self, clock):
        stdin = io.StringIO("add decision nan first\nadd task inf second\nlist\nexit\n")
        stdout = io.StringIO()
        session = ElvisSession(clock=clock)
        MemoryREPL(session, stdin=stdin, stdout=stdout).run()

        priorities = [m.priority for m in session.memory.list_entries()]
        assert priorities == [5, 7]
        assert "[task] second" in stdout.getvalue()
        assert stdout.getvalue().rstrip().endswith("Bye!")
