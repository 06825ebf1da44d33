"""Process-wide directory listing cache with bounded subtree pre-warm.

A populated key is never refreshed or evicted. The first visit to a
directory pays for walking its subtree so later descents are cache-only.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .filesystem import FileSystem

logger = logging.getLogger(__name__)

DEFAULT_PREWARM_DEPTH = 8


class FolderCache:
    """Map absolute directory paths to their ordered child paths.

    ``max_depth`` bounds how many levels below a freshly listed directory are
    pre-warmed; ``0`` disables pre-warm. A child whose real path is one of its
    own ancestors is skipped so symlink cycles terminate.
    """

    def __init__(self, filesystem: FileSystem, max_depth: int = DEFAULT_PREWARM_DEPTH) -> None:
        self.filesystem = filesystem
        self.max_depth = max(0, max_depth)
        self._entries: dict[Path, tuple[Path, ...]] = {}

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def cached_paths(self) -> tuple[Path, ...]:
        return tuple(self._entries)

    def get_or_populate(self, path: Path) -> tuple[tuple[Path, ...], Exception | None]:
        """Return cached children for ``path``, listing and pre-warming on miss.

        Returns ``((), error)`` without storing anything when ``path`` itself
        cannot be listed.
        """
        cached = self._entries.get(path)
        if cached is not None:
            return cached, None

        children, error = self.filesystem.list_children(path)
        if error is not None:
            logger.debug("listing %s failed: %s", path, error)
            return (), error
        self._entries[path] = children

        before = len(self._entries)
        ancestors = frozenset({self.filesystem.real_path(path)})
        self._prewarm(children, depth=1, ancestors=ancestors)
        warmed = len(self._entries) - before
        if warmed:
            logger.debug("pre-warmed %d directories under %s", warmed, path)
        return children, None

    def _prewarm(self, children: tuple[Path, ...], depth: int, ancestors: frozenset[Path]) -> None:
        if depth > self.max_depth:
            return
        for child in children:
            if child in self._entries or not self.filesystem.is_dir(child):
                continue
            real = self.filesystem.real_path(child)
            if real in ancestors:
                continue

            grandchildren, error = self.filesystem.list_children(child)
            if error is not None:
                logger.debug("pre-warm skipped %s: %s", child, error)
                continue
            self._entries[child] = grandchildren
            self._prewarm(grandchildren, depth + 1, ancestors | {real})


__all__ = [
    "DEFAULT_PREWARM_DEPTH",
    "FolderCache",
]
