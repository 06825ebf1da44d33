"""Linear back/forward history of visited directories.

This module intentionally has no UI concerns. Histories are immutable;
every operation returns the history to use next.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class NavigationHistory:
    """Visited directories plus the index of the displayed one."""

    entries: tuple[Path, ...]
    cursor: int = 0

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError("history needs at least one entry")
        if not 0 <= self.cursor < len(self.entries):
            raise ValueError(f"history cursor {self.cursor} out of range")

    @classmethod
    def start(cls, path: Path) -> NavigationHistory:
        """Create a history holding only the startup directory."""
        return cls(entries=(path,), cursor=0)

    @property
    def can_go_back(self) -> bool:
        return self.cursor > 0

    @property
    def can_go_forward(self) -> bool:
        return self.cursor < len(self.entries) - 1

    def current(self) -> Path:
        return self.entries[self.cursor]

    def go_to(self, path: Path) -> NavigationHistory:
        """Drop forward entries past the cursor, then append ``path``."""
        kept = self.entries[: self.cursor + 1]
        return NavigationHistory(entries=(*kept, path), cursor=len(kept))

    def back(self) -> tuple[NavigationHistory, bool]:
        if not self.can_go_back:
            return self, False
        return NavigationHistory(entries=self.entries, cursor=self.cursor - 1), True

    def forward(self) -> tuple[NavigationHistory, bool]:
        if not self.can_go_forward:
            return self, False
        return NavigationHistory(entries=self.entries, cursor=self.cursor + 1), True


__all__ = ["NavigationHistory"]
