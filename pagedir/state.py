from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .history import NavigationHistory

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class BrowserState:
    current_dir: Path
    entries: tuple[Path, ...]
    history: NavigationHistory
    page_size: int = DEFAULT_PAGE_SIZE
    cursor: int = 0
    page: int = 0
    selected: frozenset[int] = field(default_factory=frozenset)
    command: str = ""
    quitting: bool = False

    @property
    def last_index(self) -> int:
        return max(0, len(self.entries) - 1)

    @property
    def page_count(self) -> int:
        if not self.entries:
            return 1
        return (len(self.entries) + self.page_size - 1) // self.page_size

    def visible_range(self) -> range:
        """Indices of entries shown on the current page."""
        start = self.page * self.page_size
        return range(start, min(start + self.page_size, len(self.entries)))

    def current_entry(self) -> Path | None:
        if not self.entries:
            return None
        return self.entries[self.cursor]

    def selected_paths(self) -> tuple[Path, ...]:
        return tuple(self.entries[idx] for idx in sorted(self.selected) if idx < len(self.entries))
