"""Command-line front door for pagedir.

Parses CLI options, merges them over persisted config, sets up logging, and
dispatches into the interactive browser (or prints one page with ``--list``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .editor import resolve_editor_command
from .runtime import render_listing, run_browser
from .runtime.app import BrowserOptions
from .runtime.config import load_settings, save_theme_name
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _theme_name(value: str) -> str:
    candidate = value.strip().lower()
    if candidate not in available_theme_names():
        raise argparse.ArgumentTypeError(
            f"unknown theme {value!r} (choose from: {', '.join(available_theme_names())})"
        )
    return candidate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a directory tree page by page and open files in an editor."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to browse. Defaults to current directory.")
    parser.add_argument("--page-size", type=_positive_int, default=None, help="Entries shown per page.")
    parser.add_argument("--editor", default=None, help="Editor command used to open files (default: $VISUAL, $EDITOR, nvim).")
    parser.add_argument("--show-hidden", action="store_true", default=None, help="Include dot-files in listings.")
    parser.add_argument(
        "--theme",
        type=_theme_name,
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--prewarm-depth",
        type=_nonnegative_int,
        default=None,
        help="Directory levels listed ahead of time on first visit (0 disables).",
    )
    parser.add_argument("--list", action="store_true", help="Print the first page and exit without interaction.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write log records to PATH.")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level (requires --log-file).")
    return parser


def configure_logging(log_file: str | None, debug: bool) -> None:
    """Route package logs to ``log_file``; the terminal belongs to the UI."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("pagedir")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.debug)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    settings = load_settings()
    if args.theme is not None:
        save_theme_name(args.theme)
    options = BrowserOptions(
        page_size=args.page_size if args.page_size is not None else settings.page_size,
        editor_command=resolve_editor_command(args.editor or settings.editor),
        show_hidden=bool(args.show_hidden) if args.show_hidden is not None else settings.show_hidden,
        prewarm_depth=args.prewarm_depth if args.prewarm_depth is not None else settings.prewarm_depth,
        theme=resolve_theme(args.theme or settings.theme, no_color=args.no_color),
    )

    if args.list or not (sys.stdin.isatty() and sys.stdout.isatty()):
        sys.stdout.write(render_listing(path, options))
        return

    run_browser(path, options)


if __name__ == "__main__":
    main()
