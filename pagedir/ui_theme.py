"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the header and listing rows. Entry icons carry
their own colors and are only suppressed by the plain theme.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    header: str
    command: str
    cursor_marker: str
    selected_marker: str
    directory: str
    file: str
    dim: str
    icon_colors: bool = True


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;38;5;81m",
    command="\033[38;5;229m",
    cursor_marker="\033[38;5;44m",
    selected_marker="\033[38;5;42m",
    directory="\033[1;34m",
    file="\033[38;5;252m",
    dim="\033[2;38;5;250m",
)

# Grayscale palette for terminals where the default colors clash.
MONO_THEME = UITheme(
    name="mono",
    reset="\033[0m",
    header="\033[1;38;2;224;224;224m",
    command="\033[38;2;255;255;255m",
    cursor_marker="\033[38;2;224;224;224m",
    selected_marker="\033[38;2;192;192;192m",
    directory="\033[38;2;208;208;208m",
    file="\033[38;2;240;240;240m",
    dim="\033[2m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    command="",
    cursor_marker="",
    selected_marker="",
    directory="",
    file="",
    dim="",
    icon_colors=False,
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    MONO_THEME.name: MONO_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "MONO_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
