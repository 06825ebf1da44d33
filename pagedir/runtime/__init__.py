"""Public runtime entry points.

Groups the interactive browser bootstrap (``run_browser``), the plain
listing renderer, and the lower-level event loop used by tests.
"""

from __future__ import annotations


def run_browser(*args, **kwargs):
    """Lazily import the browser entrypoint so terminal modules load on demand."""
    from .app import run_browser as _run_browser

    return _run_browser(*args, **kwargs)


def render_listing(*args, **kwargs):
    from .app import render_listing as _render_listing

    return _render_listing(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_browser",
    "render_listing",
    "run_main_loop",
]
