"""Browser events and key-token decoding.

Key tokens use the vocabulary produced by ``runtime.input.read_key``.
Letters bound to navigation (``q``, ``j``, ``k``, space) only navigate while
the command buffer is empty; once a command is being typed they are text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventKind(Enum):
    QUIT = "quit"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    NAVIGATE_BACK = "navigate_back"
    NAVIGATE_FORWARD = "navigate_forward"
    TOGGLE_SELECT = "toggle_select"
    ACTIVATE = "activate"
    COMMAND_APPEND = "command_append"
    BACKSPACE = "backspace"
    COMMAND_SUBMIT = "command_submit"
    COMMAND_CANCEL = "command_cancel"


@dataclass(frozen=True)
class BrowserEvent:
    """One decoded input event; ``text`` is only used by ``COMMAND_APPEND``."""

    kind: EventKind
    text: str = ""


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single event kind."""

    combos: tuple[str, ...]
    kind: EventKind


class KeyComboRegistry:
    """Small key-to-event table."""

    def __init__(self) -> None:
        self._kinds: dict[str, EventKind] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing entries for same combos."""
        for combo in binding.combos:
            self._kinds[combo] = binding.kind
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> EventKind | None:
        return self._kinds.get(key)


COMMAND_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("CTRL_C",), EventKind.QUIT),
    KeyComboBinding(("UP",), EventKind.MOVE_UP),
    KeyComboBinding(("DOWN",), EventKind.MOVE_DOWN),
    KeyComboBinding(("PGUP", "CTRL_U"), EventKind.PAGE_UP),
    KeyComboBinding(("PGDN", "CTRL_D"), EventKind.PAGE_DOWN),
    KeyComboBinding(("LEFT",), EventKind.NAVIGATE_BACK),
    KeyComboBinding(("RIGHT",), EventKind.NAVIGATE_FORWARD),
    KeyComboBinding(("ENTER_CR", "ENTER_LF"), EventKind.ACTIVATE),
    KeyComboBinding(("BACKSPACE",), EventKind.BACKSPACE),
    KeyComboBinding((":",), EventKind.COMMAND_SUBMIT),
    KeyComboBinding((";", "ESC"), EventKind.COMMAND_CANCEL),
)

NAVIGATION_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("q",), EventKind.QUIT),
    KeyComboBinding(("k",), EventKind.MOVE_UP),
    KeyComboBinding(("j",), EventKind.MOVE_DOWN),
    KeyComboBinding((" ",), EventKind.TOGGLE_SELECT),
)


def decode_key(key: str, command_active: bool = False) -> BrowserEvent | None:
    """Translate one key token into a browser event.

    Returns ``None`` for tokens that carry no meaning here (timeouts, mouse
    reports, unbound control keys).
    """
    kind = COMMAND_KEYS.lookup(key)
    if kind is None and not command_active:
        kind = NAVIGATION_KEYS.lookup(key)
    if kind is not None:
        return BrowserEvent(kind)
    if len(key) == 1 and key.isprintable():
        return BrowserEvent(EventKind.COMMAND_APPEND, text=key)
    return None


__all__ = [
    "EventKind",
    "BrowserEvent",
    "KeyComboBinding",
    "KeyComboRegistry",
    "decode_key",
]
