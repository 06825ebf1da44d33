"""Pure browser transitions: ``(state, event) -> state``.

Side effects are limited to the injected context: the shared folder cache
may grow, and the editor callback may run (and block) for openable files.
Any rejected navigation returns the input state object unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from .entries import is_openable
from .events import BrowserEvent, EventKind
from .filesystem import FileSystem, normalize_path
from .folder_cache import FolderCache
from .history import NavigationHistory
from .state import DEFAULT_PAGE_SIZE, BrowserState

logger = logging.getLogger(__name__)

CD_PREFIX = "cd "
WRITE_PREFIX = "w"


@dataclass(frozen=True)
class BrowserContext:
    """Collaborators a transition may consult."""

    filesystem: FileSystem
    folder_cache: FolderCache
    open_in_editor: Callable[[Path], None]


def initial_state(
    start_dir: Path,
    context: BrowserContext,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> tuple[BrowserState | None, Exception | None]:
    """Build the startup state for ``start_dir``, or report why it failed."""
    resolved, error = context.filesystem.resolve_directory(start_dir)
    if error is not None or resolved is None:
        return None, error
    entries, error = context.folder_cache.get_or_populate(resolved)
    if error is not None:
        return None, error
    state = BrowserState(
        current_dir=resolved,
        entries=entries,
        history=NavigationHistory.start(resolved),
        page_size=max(1, page_size),
    )
    return state, None


def _with_cursor(state: BrowserState, cursor: int) -> BrowserState:
    cursor = max(0, min(cursor, state.last_index))
    return replace(state, cursor=cursor, page=cursor // state.page_size)


def _load_directory(
    state: BrowserState,
    directory: Path,
    history: NavigationHistory,
    context: BrowserContext,
) -> BrowserState:
    entries, error = context.folder_cache.get_or_populate(directory)
    if error is not None:
        logger.debug("navigation to %s rejected: %s", directory, error)
        return state
    return replace(
        state,
        current_dir=directory,
        entries=entries,
        history=history,
        cursor=0,
        page=0,
        selected=frozenset(),
    )


def descend(state: BrowserState, target: Path, context: BrowserContext) -> BrowserState:
    """Enter ``target`` (relative to ``current_dir``) and record it in history."""
    resolved, error = context.filesystem.resolve_directory(normalize_path(target, state.current_dir))
    if error is not None or resolved is None:
        logger.debug("cannot enter %s: %s", target, error)
        return state
    return _load_directory(state, resolved, state.history.go_to(resolved), context)


def _step_history(state: BrowserState, forward: bool, context: BrowserContext) -> BrowserState:
    history, moved = state.history.forward() if forward else state.history.back()
    if not moved:
        return state
    return _load_directory(state, history.current(), history, context)


def _activate(state: BrowserState, context: BrowserContext) -> BrowserState:
    entry = state.current_entry()
    if entry is None:
        return state
    if context.filesystem.is_dir(entry):
        return descend(state, entry, context)
    if not is_openable(entry):
        return state
    # Cached listings are never refreshed; the file may be gone.
    if not context.filesystem.exists(entry):
        logger.debug("not opening vanished file %s", entry)
        return state
    context.open_in_editor(entry)
    return state


def _toggle_select(state: BrowserState) -> BrowserState:
    if not state.entries:
        return state
    return replace(state, selected=state.selected ^ {state.cursor})


def _page(state: BrowserState, step: int) -> BrowserState:
    target_page = state.page + step
    if target_page < 0 or target_page >= state.page_count:
        return state
    return _with_cursor(state, state.cursor + step * state.page_size)


def run_command(state: BrowserState, context: BrowserContext) -> BrowserState:
    """Interpret the command buffer; the buffer is always cleared."""
    command = state.command
    cleared = replace(state, command="")
    if command.startswith(CD_PREFIX):
        target = command[len(CD_PREFIX) :].strip()
        if not target:
            return cleared
        return descend(cleared, Path(target), context)
    if command.startswith(WRITE_PREFIX):
        # Placeholder save command: recognized, intentionally does nothing.
        return cleared
    if command:
        logger.debug("discarding unknown command %r", command)
    return cleared


def apply_event(state: BrowserState, event: BrowserEvent, context: BrowserContext) -> BrowserState:
    """Apply one event and return the next state."""
    if state.quitting:
        return state

    kind = event.kind
    if kind is EventKind.QUIT:
        return replace(state, quitting=True)
    if kind is EventKind.MOVE_UP:
        return _with_cursor(state, state.cursor - 1) if state.cursor > 0 else state
    if kind is EventKind.MOVE_DOWN:
        return _with_cursor(state, state.cursor + 1) if state.cursor < state.last_index else state
    if kind is EventKind.PAGE_UP:
        return _page(state, -1)
    if kind is EventKind.PAGE_DOWN:
        return _page(state, 1)
    if kind is EventKind.NAVIGATE_BACK:
        return _step_history(state, forward=False, context=context)
    if kind is EventKind.NAVIGATE_FORWARD:
        return _step_history(state, forward=True, context=context)
    if kind is EventKind.TOGGLE_SELECT:
        return _toggle_select(state)
    if kind is EventKind.ACTIVATE:
        return _activate(state, context)
    if kind is EventKind.COMMAND_APPEND:
        return replace(state, command=state.command + event.text)
    if kind is EventKind.BACKSPACE:
        return replace(state, command=state.command[:-1]) if state.command else state
    if kind is EventKind.COMMAND_SUBMIT:
        return run_command(state, context)
    if kind is EventKind.COMMAND_CANCEL:
        return replace(state, command="") if state.command else state
    return state


__all__ = [
    "BrowserContext",
    "initial_state",
    "descend",
    "run_command",
    "apply_event",
]
