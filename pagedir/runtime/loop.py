"""Main interactive event loop.

One key is decoded, applied to completion, and rendered before the next key
is read. The loop is wiring only; transitions live in ``state_machine``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..events import decode_key
from ..state import BrowserState
from ..state_machine import BrowserContext, apply_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected I/O used by ``run_main_loop``.

    Keeping the loop callback-driven makes it testable with scripted keys
    and a recording renderer.
    """

    read_key: Callable[[], str]
    render: Callable[[BrowserState], None]


def run_main_loop(
    state: BrowserState,
    context: BrowserContext,
    callbacks: RuntimeLoopCallbacks,
) -> BrowserState:
    """Run until a quit event; return the final state."""
    dirty = True
    while not state.quitting:
        if dirty:
            callbacks.render(state)
            dirty = False

        key = callbacks.read_key()
        if not key:
            continue
        event = decode_key(key, command_active=bool(state.command))
        if event is None:
            logger.debug("ignoring key %r", key)
            continue

        # The editor leaves the screen dirty.
        state = apply_event(state, event, context)
        dirty = True
    return state
