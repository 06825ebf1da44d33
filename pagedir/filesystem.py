"""Filesystem capability used by the browser core.

Every call is fallible and synchronous. Failures come back as the second
element of a ``(value, error)`` tuple instead of being raised, so callers can
reject a navigation without unwinding the event loop.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Operations the browser needs from a filesystem."""

    def exists(self, path: Path) -> bool:
        ...

    def is_dir(self, path: Path) -> bool:
        ...

    def list_children(self, path: Path) -> tuple[tuple[Path, ...], Exception | None]:
        ...

    def resolve_directory(self, path: Path) -> tuple[Path | None, Exception | None]:
        ...

    def real_path(self, path: Path) -> Path:
        ...


def normalize_path(path: Path, base: Path | None = None) -> Path:
    """Return an absolute, ``..``-collapsed path without following symlinks."""
    expanded = Path(os.path.expanduser(str(path)))
    if not expanded.is_absolute():
        anchor = base if base is not None else Path.cwd()
        expanded = anchor / expanded
    return Path(os.path.normpath(str(expanded)))


class LocalFileSystem:
    """``FileSystem`` backed by ``os.scandir``/``os.stat``."""

    def __init__(self, show_hidden: bool = False) -> None:
        self.show_hidden = show_hidden

    def exists(self, path: Path) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: Path) -> bool:
        return os.path.isdir(path)

    def list_children(self, path: Path) -> tuple[tuple[Path, ...], Exception | None]:
        """List immediate children of ``path`` sorted by name.

        Dot-entries are skipped unless ``show_hidden`` is set. Returns
        ``((), error)`` when the directory cannot be scanned.
        """
        names: list[str] = []
        try:
            with os.scandir(path) as entries:
                for child in entries:
                    if not self.show_hidden and child.name.startswith("."):
                        continue
                    names.append(child.name)
        except OSError as exc:
            return (), exc

        names.sort()
        return tuple(path / name for name in names), None

    def resolve_directory(self, path: Path) -> tuple[Path | None, Exception | None]:
        """Validate that ``path`` is an enterable directory.

        Stands in for changing the process working directory: the directory
        must exist, be a directory, and grant search permission.
        """
        target = normalize_path(path)
        if not os.path.exists(target):
            return None, FileNotFoundError(2, "No such file or directory", str(target))
        if not os.path.isdir(target):
            return None, NotADirectoryError(20, "Not a directory", str(target))
        if not os.access(target, os.X_OK):
            return None, PermissionError(13, "Permission denied", str(target))
        return target, None

    def real_path(self, path: Path) -> Path:
        return Path(os.path.realpath(path))


__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "normalize_path",
]
