"""Entry point: python -m elvis [chat|demo]

- No args / "chat": Interactive working-memory REPL
- "demo":           Scripted walk-through that fills memory and triggers an eviction
"""

from __future__ import annotations

import logging
import sys

from elvis.config import load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_cli() -> None:
    """Interactive REPL mode."""
    config = load_config()
    _setup_logging(config.log_level)

    from elvis.cli import MemoryREPL
    from elvis.core import ElvisSession

    MemoryREPL(ElvisSession(config)).run()


def _run_demo() -> None:
    """Fill every slot, touch one entry, then overflow by one."""
    config = load_config()
    _setup_logging(config.log_level)

    from elvis.core import ElvisSession

    session = ElvisSession(config)
    memory = session.memory

    memory.insert("Use llama3.2 for quick responses", "decision", 7, ["model-selection"])
    memory.insert("Sky is blue due to Rayleigh scattering", "insight", 6, ["physics"])
    memory.insert("Delegated tasks average 30-40 seconds", "pattern", 5, ["performance"])
    first = memory.list_entries()[0]
    memory.access(first.id)
    memory.access(first.id)

    while not memory.is_full():
        memory.insert(f"Filler result #{memory.size()}", "result", 2, ["demo"])
    print(session.call_memory_tool(action="summary"))
    print()
    print(
        session.call_memory_tool(
            action="add",
            content="New important decision: use deepseek for analysis",
            category="decision",
            priority=6,
        )
    )
    print()
    print(session.call_memory_tool(action="list"))


def main() -> None:
    cmd = sys.argv[1] if len(sys.argv) > 1 else "chat"

    if cmd in ("chat", "repl"):
        _run_cli()
    elif cmd == "demo":
        _run_demo()
    else:
        print("Usage: python -m elvis [chat|demo]")
        print("  chat   — Interactive working-memory REPL (default)")
        print("  demo   — Fill memory and show an eviction")
        sys.exit(1)


if __name__ == "__main__":
    main()
