"""Browser bootstrap: wires filesystem, cache, editor, and terminal together."""

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..editor import launch_editor
from ..filesystem import FileSystem, LocalFileSystem
from ..folder_cache import FolderCache
from ..render import build_frame_lines, draw_frame
from ..state import BrowserState
from ..state_machine import BrowserContext, initial_state
from ..ui_theme import UITheme
from .input import read_key
from .loop import RuntimeLoopCallbacks, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserOptions:
    """Resolved settings for one browser session."""

    page_size: int
    editor_command: str
    show_hidden: bool
    prewarm_depth: int
    theme: UITheme


def build_context(
    options: BrowserOptions,
    open_in_editor: Callable[[Path], None],
    filesystem: FileSystem | None = None,
) -> BrowserContext:
    filesystem = filesystem if filesystem is not None else LocalFileSystem(show_hidden=options.show_hidden)
    return BrowserContext(
        filesystem=filesystem,
        folder_cache=FolderCache(filesystem, max_depth=options.prewarm_depth),
        open_in_editor=open_in_editor,
    )


def bootstrap_state(start: Path, context: BrowserContext, options: BrowserOptions) -> BrowserState:
    """Build the startup state or exit with a user-facing message."""
    state, error = initial_state(start, context, page_size=options.page_size)
    if state is None:
        if isinstance(error, FileNotFoundError):
            raise SystemExit(f"Path not found: {start}")
        raise SystemExit(f"Cannot list {start}: {error}")
    return state


def render_listing(start: Path, options: BrowserOptions) -> str:
    """Render the first page for ``start`` as plain output (no terminal modes)."""
    context = build_context(options, open_in_editor=lambda _path: None)
    state = bootstrap_state(start, context, options)
    width = shutil.get_terminal_size((80, 24)).columns
    lines = build_frame_lines(state, context.filesystem, options.theme, width, show_footer=False)
    return "\n".join(lines) + "\n"


def run_browser(start: Path, options: BrowserOptions) -> BrowserState:
    """Run the interactive browser on the controlling terminal."""
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    def open_in_editor(path: Path) -> None:
        error = launch_editor(
            path,
            options.editor_command,
            disable_tui_mode=terminal.disable_tui_mode,
            enable_tui_mode=terminal.enable_tui_mode,
        )
        if error is not None:
            logger.warning("%s (%s)", error, path)

    context = build_context(options, open_in_editor)
    state = bootstrap_state(start, context, options)

    def read() -> str:
        # EOF on stdin quits.
        return read_key(stdin_fd) or "CTRL_C"

    def render(current: BrowserState) -> None:
        width = shutil.get_terminal_size((80, 24)).columns
        draw_frame(build_frame_lines(current, context.filesystem, options.theme, width))

    logger.info("browsing %s (page size %d)", state.current_dir, state.page_size)
    with terminal.raw_mode():
        final = run_main_loop(state, context, RuntimeLoopCallbacks(read_key=read, render=render))
    return final
