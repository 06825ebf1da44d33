"""Entry classification derived from paths on demand.

Nothing here is cached: whether an entry is a directory is asked of the
filesystem each time, and openability is a pure extension check.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

OPENABLE_EXTENSIONS: tuple[str, ...] = (
    ".txt",
    ".md",
    ".go",
    ".py",
    ".js",
    ".json",
    ".html",
    ".css",
    ".java",
    ".cpp",
    ".h",
    ".sh",
    ".rb",
    ".c",
    ".jsx",
    ".tsx",
    ".astro",
)


@dataclass(frozen=True)
class EntryIcon:
    """Glyph plus ``#rrggbb`` color used in listing rows."""

    glyph: str
    color: str


DIRECTORY_ICON = EntryIcon("\U0001f4c1", "#D0D0D0")
DEFAULT_FILE_ICON = EntryIcon("", "#A9A9A9")

_ICONS_BY_EXTENSION: dict[str, EntryIcon] = {
    ".go": EntryIcon("", "#E0E0E0"),
    ".json": EntryIcon("", "#FFFF00"),
    ".html": EntryIcon("", "#FFA500"),
    ".md": EntryIcon("", "#00FF00"),
    ".js": EntryIcon("", "#FF0000"),
    ".css": EntryIcon("", "#FF00FF"),
    ".py": EntryIcon("", "#00FFFF"),
    ".java": EntryIcon("", "#000080"),
    ".cpp": EntryIcon("", "#FFD700"),
    ".h": EntryIcon("", "#FFD700"),
    ".rb": EntryIcon("", "#C8102E"),
    ".c": EntryIcon("", "#4B0082"),
    ".sh": EntryIcon("", "#FF4500"),
    ".jsx": EntryIcon("", "#FF8C00"),
    ".tsx": EntryIcon("", "#00BFFF"),
    ".astro": EntryIcon("", "#8A2BE2"),
}


def is_openable(path: Path) -> bool:
    """Return whether ``path`` has an extension the editor may open."""
    return path.name.endswith(OPENABLE_EXTENSIONS)


def icon_for(path: Path, is_dir: bool) -> EntryIcon:
    """Return the listing icon for one entry."""
    if is_dir:
        return DIRECTORY_ICON
    return _ICONS_BY_EXTENSION.get(path.suffix, DEFAULT_FILE_ICON)


__all__ = [
    "OPENABLE_EXTENSIONS",
    "EntryIcon",
    "DIRECTORY_ICON",
    "DEFAULT_FILE_ICON",
    "is_openable",
    "icon_for",
]
