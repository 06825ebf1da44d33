"""Editor launch helper for opening a file from the browser.

Runs the configured editor while temporarily leaving raw/alternate-screen
TUI mode. Returns an error message string instead of raising.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from pathlib import Path
from typing import Callable

DEFAULT_EDITOR = "nvim"


def resolve_editor_command(configured: str | None = None) -> str:
    """Pick the editor command: explicit setting, ``$VISUAL``, ``$EDITOR``, then nvim."""
    for candidate in (configured, os.environ.get("VISUAL"), os.environ.get("EDITOR")):
        if candidate and candidate.strip():
            return candidate.strip()
    return DEFAULT_EDITOR


def launch_editor(
    target: Path,
    editor_command: str,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> str | None:
    try:
        cmd = shlex.split(editor_command)
    except ValueError as exc:
        return f"Cannot edit: bad editor command ({exc})."
    if not cmd:
        return "Cannot edit: editor command is empty."

    disable_tui_mode()
    try:
        subprocess.run([*cmd, str(target)], check=False)
    except Exception as exc:
        return f"Failed to launch editor: {exc}"
    finally:
        enable_tui_mode()
    return None
