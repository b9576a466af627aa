"""Configuration loading from environment variables and elvis.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from elvis.memory.store import DEFAULT_CAPACITY

_CONFIG_FILENAME = "elvis.toml"


@dataclass
class MemoryConfig:
    """Working memory configuration."""

    capacity: int = DEFAULT_CAPACITY
    archive_dir: Path | None = None


@dataclass
class ElvisConfig:
    """Top-level ELVIS configuration."""

    memory: MemoryConfig = field(default_factory=MemoryConfig)
    log_level: str = "INFO"


def _parse_capacity(value: object) -> int:
    try:
        capacity = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"memory capacity must be an integer, got {value!r}") from None
    if capacity < 1:
        raise ValueError(f"memory capacity must be at least 1, got {capacity}")
    return capacity


def load_config(config_path: Path | None = None) -> ElvisConfig:
    """Load configuration from environment variables and optional elvis.toml.

    Priority: environment variables > elvis.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.elvis/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".elvis" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    memory_data = file_data.get("memory", {})
    archive_dir = os.getenv("ELVIS_ARCHIVE_DIR", memory_data.get("archive_dir"))

    return ElvisConfig(
        memory=MemoryConfig(
            capacity=_parse_capacity(
                os.getenv("ELVIS_MEMORY_CAPACITY", memory_data.get("capacity", DEFAULT_CAPACITY))
            ),
            archive_dir=Path(archive_dir).expanduser() if archive_dir else None,
        ),
        log_level=os.getenv("ELVIS_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
