"""Frame rendering for the browser.

``build_frame_lines`` is a pure function of state; ``draw_frame`` is the only
part that touches the terminal.
"""

from __future__ import annotations

import os
import sys

from .ansi import clip_ansi_line, hex_foreground
from .entries import icon_for
from .filesystem import FileSystem
from .state import BrowserState
from .ui_theme import UITheme

CURSOR_GLYPH = "▶"
SELECTED_GLYPH = "✔"

FOOTER_HINT = "j/k move  ←/→ back/fwd  space select  enter open  cd <dir>: command  ; cancel  q quit"


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def format_header(state: BrowserState, theme: UITheme) -> str:
    """Return ``Dir | Cmd | Pg`` header line for ``state``."""
    name = state.current_dir.name or str(state.current_dir)
    tail = f" | Pg: {state.page + 1}/{state.page_count}"
    selected = state.selected_paths()
    if selected:
        tail += f" | Sel: {len(selected)}"
    return (
        _styled(f"Dir: {name} | Cmd: ", theme.header, theme)
        + _styled(state.command, theme.command, theme)
        + _styled(tail, theme.header, theme)
    )


def format_entry_row(
    state: BrowserState,
    index: int,
    filesystem: FileSystem,
    theme: UITheme,
) -> str:
    """Render one listing row: cursor marker, selection box, icon, name."""
    path = state.entries[index]
    is_dir = filesystem.is_dir(path)

    cursor = _styled(CURSOR_GLYPH, theme.cursor_marker, theme) if index == state.cursor else " "
    selected = _styled(SELECTED_GLYPH, theme.selected_marker, theme) if index in state.selected else " "

    icon = icon_for(path, is_dir)
    glyph = icon.glyph
    if theme.icon_colors:
        glyph = _styled(glyph, hex_foreground(icon.color), theme)

    name = _styled(path.name, theme.directory if is_dir else theme.file, theme)
    return f"{cursor} [{selected}] {glyph} {name}"


def build_frame_lines(
    state: BrowserState,
    filesystem: FileSystem,
    theme: UITheme,
    width: int,
    show_footer: bool = True,
) -> list[str]:
    lines = [format_header(state, theme)]
    visible = state.visible_range()
    if not visible:
        lines.append(_styled("  (empty)", theme.dim, theme))
    for index in visible:
        lines.append(format_entry_row(state, index, filesystem, theme))
    if show_footer:
        lines.append("")
        lines.append(_styled(FOOTER_HINT, theme.dim, theme))
    return [clip_ansi_line(line, width) for line in lines]


def draw_frame(lines: list[str]) -> None:
    out = ["\033[H\033[J"]
    out.append("\r\n".join(lines))
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))
