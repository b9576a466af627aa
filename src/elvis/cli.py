"""Local REPL over the elvis_memory tool, for development and testing."""

from __future__ import annotations

import logging
import shlex
import sys
from typing import TextIO

from elvis.core import ElvisSession
from elvis.tools.memory_tools import MEMORY_HELP

logger = logging.getLogger(__name__)

USAGE = """\
Commands:
  add <category> <priority> <text...>   store a memory
  list                                  detailed listing with scores
  access <id>                           read a memory and bump its access count
  clear                                 remove all memories
  summary                               compact summary (default)
  help                                  tool documentation
  exit                                  quit"""


def parse_command(line: str) -> dict | None:
    """Turn a REPL line into elvis_memory tool arguments. None means "show usage"."""
    try:
        words = shlex.split(line)
    except ValueError:
        words = line.split()
    if not words:
        return None

    action, rest = words[0].lower(), words[1:]
    if action == "add":
        if len(rest) < 3:
            return {"action": "add"}
        category, priority, text = rest[0], rest[1], " ".join(rest[2:])
        try:
            value: float | None = float(priority)
        except ValueError:
            # No priority given: treat it as part of the text
            value, text = None, " ".join(rest[1:])
        return {"action": "add", "category": category, "priority": value, "content": text}
    if action == "access":
        return {"action": "access", "memory_id": rest[0] if rest else None}
    if action in ("list", "clear", "summary"):
        return {"action": action}
    return None


class MemoryREPL:
    """Interactive REPL — reads commands from stdin, writes tool output to stdout."""

    def __init__(
        self,
        session: ElvisSession,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.session = session
        self._stdin = stdin
        self._stdout = stdout or sys.stdout

    def run(self) -> None:
        self._print("ELVIS working memory (type 'exit' or Ctrl+C to quit)")
        self._print("-" * 48)

        while True:
            try:
                line = self._read_input()
            except (EOFError, KeyboardInterrupt):
                self._print("\nBye!")
                break

            if line is None or line.strip().lower() in ("exit", "quit"):
                self._print("Bye!")
                break

            text = line.strip()
            if not text:
                continue
            self._print(self.handle(text))

    def handle(self, text: str) -> str:
        """Execute one command line and return the response text."""
        if text.lower() == "help":
            return MEMORY_HELP
        args = parse_command(text)
        if args is None:
            return USAGE
        logger.debug("REPL command: %s", args)
        return self.session.call_memory_tool(**args)

    def _read_input(self) -> str | None:
        self._stdout.write("\n> ")
        self._stdout.flush()
        if self._stdin is not None:
            line = self._stdin.readline()
            return line.rstrip("\n") if line else None
        raw = sys.stdin.buffer.readline()
        if not raw:
            return None
        return raw.decode("utf-8", errors="replace").rstrip("\n")

    def _print(self, text: str) -> None:
        print(text, file=self._stdout)
