"""Persistent JSON config helpers.

Stores page size, editor command, hidden-file preference, theme, and the
cache pre-warm depth. All access is defensive: malformed or missing config
falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..folder_cache import DEFAULT_PREWARM_DEPTH
from ..state import DEFAULT_PAGE_SIZE

APP_NAME = "pagedir"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class BrowserSettings:
    """Effective settings after config load (before CLI overrides)."""

    page_size: int = DEFAULT_PAGE_SIZE
    editor: str | None = None
    show_hidden: bool = False
    theme: str | None = None
    prewarm_depth: int = DEFAULT_PREWARM_DEPTH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _coerce_int(value: object, minimum: int) -> int | None:
    """Accept real integers ``>= minimum``; booleans and other types are invalid."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < minimum:
        return None
    return value


def _coerce_text(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_page_size(config: dict[str, object] | None = None) -> int:
    """Return persisted entries-per-page, defaulting when unset or invalid."""
    data = load_config() if config is None else config
    value = _coerce_int(data.get("page_size"), minimum=1)
    return value if value is not None else DEFAULT_PAGE_SIZE


def load_prewarm_depth(config: dict[str, object] | None = None) -> int:
    data = load_config() if config is None else config
    value = _coerce_int(data.get("prewarm_depth"), minimum=0)
    return value if value is not None else DEFAULT_PREWARM_DEPTH


def load_editor_command(config: dict[str, object] | None = None) -> str | None:
    data = load_config() if config is None else config
    return _coerce_text(data.get("editor"))


def load_show_hidden(config: dict[str, object] | None = None) -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    data = load_config() if config is None else config
    value = data.get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def load_theme_name(config: dict[str, object] | None = None) -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    data = load_config() if config is None else config
    return _coerce_text(data.get("theme"))


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_settings() -> BrowserSettings:
    """Read the config file once and return validated settings."""
    config = load_config()
    return BrowserSettings(
        page_size=load_page_size(config),
        editor=load_editor_command(config),
        show_hidden=load_show_hidden(config),
        theme=load_theme_name(config),
        prewarm_depth=load_prewarm_depth(config),
    )
