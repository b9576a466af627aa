"""On-evict sinks for working memory.

Evicted entries are gone from the store either way; a sink only decides what
gets reported or kept elsewhere. Decision and insight entries are the
"important" ones worth archiving.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import frontmatter

from elvis.memory.entry import Category

if TYPE_CHECKING:
    from elvis.memory.entry import MemoryEntry

logger = logging.getLogger(__name__)

IMPORTANT_CATEGORIES = frozenset({Category.DECISION, Category.INSIGHT})


def is_important(entry: MemoryEntry) -> bool:
    return entry.known_category in IMPORTANT_CATEGORIES


def log_important_eviction(entry: MemoryEntry, score: float) -> None:
    """Default sink: notify about important evictions, keep nothing."""
    if is_important(entry):
        logger.info("Archiving important memory: %s (score=%.3f)", entry.id, score)


class MarkdownArchive:
    """Write evicted decision/insight entries to markdown files with YAML frontmatter.

    One file per eviction under ``root/<category>/<id>-<evicted-at>.md``; ids are
    only unique among live entries, so a reused id never overwrites an earlier
    file. Other categories are dropped silently unless ``important_only`` is False.
    """

    def __init__(
        self,
        root: Path,
        important_only: bool = True,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.root = root
        self.important_only = important_only
        self._clock = clock

    def __call__(self, entry: MemoryEntry, score: float) -> None:
        if self.important_only and not is_important(entry):
            return
        self.write(entry, score)

    def write(self, entry: MemoryEntry, score: float) -> Path:
        """Render ``entry`` and write it out. Returns the file path."""
        category_dir = self.root / self._slugify(entry.category)
        category_dir.mkdir(parents=True, exist_ok=True)
        evicted_at = self._clock()
        stem = f"{self._slugify(entry.id)}-{evicted_at.strftime('%Y%m%dT%H%M%S')}"
        path = category_dir / f"{stem}.md"
        counter = 2
        while path.exists():
            path = category_dir / f"{stem}-{counter}.md"
            counter += 1

        meta = entry.to_dict()
        content = meta.pop("content")
        meta["evicted_at"] = evicted_at.isoformat(timespec="seconds")
        meta["score_at_eviction"] = round(score, 3)
        post = frontmatter.Post(content, **meta)
        path.write_text(frontmatter.dumps(post) + "\n", encoding="utf-8")
        logger.info("Archived %s to %s", entry.id, path)
        return path

    def load(self, path: Path) -> dict:
        """Read an archived entry back as a dict (metadata plus ``content``)."""
        post = frontmatter.load(str(path))
        data = dict(post.metadata)
        data["content"] = post.content
        return data

    def entries(self) -> list[Path]:
        """All archived files, oldest name first."""
        if not self.root.is_dir():
            return []
        return sorted(self.root.rglob("*.md"))

    def _slugify(self, name: str) -> str:
        slug = re.sub(r'[<>:"/\\|?*\n\r\t]', "", name)
        slug = slug.strip().replace(" ", "-")
        return slug or "unknown"
