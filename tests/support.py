"""In-memory filesystem and context builders shared by unit tests."""

from __future__ import annotations

from pathlib import Path

from pagedir.filesystem import normalize_path
from pagedir.folder_cache import FolderCache
from pagedir.state_machine import BrowserContext


class FakeFileSystem:
    """``FileSystem`` over a dict of ``directory -> child names``.

    Children that are not themselves keys are files. ``links`` maps symlink
    paths to their targets. ``list_calls`` records every listing attempt.
    """

    def __init__(
        self,
        directories: dict[str, list[str]],
        links: dict[str, str] | None = None,
    ) -> None:
        self.directories = {Path(path): tuple(names) for path, names in directories.items()}
        self.links = {Path(src): Path(dst) for src, dst in (links or {}).items()}
        self.unlistable: set[Path] = set()
        self.unenterable: set[Path] = set()
        self.list_calls: list[Path] = []

    def real_path(self, path: Path) -> Path:
        parts = Path(path).parts
        current = Path(parts[0])
        for part in parts[1:]:
            current = current / part
            for _ in range(40):
                target = self.links.get(current)
                if target is None:
                    break
                current = target
        return current

    def exists(self, path: Path) -> bool:
        real = self.real_path(path)
        if real in self.directories:
            return True
        return real.name in self.directories.get(real.parent, ())

    def is_dir(self, path: Path) -> bool:
        return self.real_path(path) in self.directories

    def list_children(self, path: Path) -> tuple[tuple[Path, ...], Exception | None]:
        self.list_calls.append(path)
        if path in self.unlistable:
            return (), PermissionError(13, "Permission denied", str(path))
        names = self.directories.get(self.real_path(path))
        if names is None:
            return (), FileNotFoundError(2, "No such file or directory", str(path))
        return tuple(path / name for name in sorted(names)), None

    def resolve_directory(self, path: Path) -> tuple[Path | None, Exception | None]:
        target = normalize_path(path, Path("/"))
        if not self.exists(target):
            return None, FileNotFoundError(2, "No such file or directory", str(target))
        if not self.is_dir(target):
            return None, NotADirectoryError(20, "Not a directory", str(target))
        if target in self.unenterable:
            return None, PermissionError(13, "Permission denied", str(target))
        return target, None


def make_context(
    filesystem: FakeFileSystem,
    opened: list[Path] | None = None,
    max_depth: int = 8,
) -> BrowserContext:
    """Build a context whose editor callback records opened paths."""
    sink = opened if opened is not None else []
    return BrowserContext(
        filesystem=filesystem,
        folder_cache=FolderCache(filesystem, max_depth=max_depth),
        open_in_editor=sink.append,
    )


def sample_tree() -> FakeFileSystem:
    """``/root`` holding ``a.txt``, ``notes.bin``, ``sub/`` and ``sub/deep/``."""
    return FakeFileSystem(
        {
            "/root": ["a.txt", "sub", "notes.bin"],
            "/root/sub": ["b.py", "deep"],
            "/root/sub/deep": ["c.md"],
        }
    )
