"""Command-line front door for dirjump.

Parses CLI options, resolves the root directory and sets up logging.
Then runs the interactive browser and prints the final jump list.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from .listing import canonical_path
from .runtime import run_browser
from .runtime.config import LOG_LEVELS, MAX_CONFIG_VIEW_HEIGHT, load_log_level
from .runtime.log import setup_logging


def _view_height(value: str) -> int:
    """argparse type for listing heights in ``[1, MAX_CONFIG_VIEW_HEIGHT]``."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0 or parsed > MAX_CONFIG_VIEW_HEIGHT:
        raise argparse.ArgumentTypeError(f"value must be between 1 and {MAX_CONFIG_VIEW_HEIGHT}")
    return parsed


def format_selection(paths: list[Path], as_json: bool = False, null_separated: bool = False) -> str:
    """Serialize the jump list for stdout."""
    if as_json:
        return json.dumps([str(path) for path in paths]) + "\n"
    if null_separated:
        return "".join(f"{path}\0" for path in paths)
    return "".join(f"{path}\n" for path in paths)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse directories from a root and print the ones you select."
    )
    parser.add_argument("root", nargs="?", default=None, help="Root directory. Defaults to your home directory.")
    hidden = parser.add_mutually_exclusive_group()
    hidden.add_argument("--hidden", dest="show_hidden", action="store_true", default=None, help="Show hidden directories.")
    hidden.add_argument("--no-hidden", dest="show_hidden", action="store_false", help="Hide hidden directories.")
    parser.add_argument("--height", type=_view_height, default=None, help="Number of listing rows shown at once.")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the selection as a JSON array.")
    output.add_argument("--print0", action="store_true", help="Separate printed paths with NUL instead of newline.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write the debug log to this file.")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="Minimum log level.")
    return parser


def main(default_root: Path | None = None) -> None:
    """Parse CLI arguments, run the browser, and print the selected directories.

    ``default_root`` is primarily for tests; when omitted the home directory
    is used.
    """
    args = build_parser().parse_args()

    if default_root is None:
        default_root = Path.home()
    root = canonical_path(args.root if args.root is not None else default_root)
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")

    log_level = args.log_level or load_log_level()
    setup_logging(log_level, args.log_file)

    try:
        selection = run_browser(root, args.show_hidden, args.height, args.no_color)
    except OSError as exc:
        logger.exception("Browser session failed")
        raise SystemExit(f"dirjump: {exc}") from exc

    sys.stdout.write(format_selection(selection, as_json=args.json, null_separated=args.print0))


if __name__ == "__main__":
    main()
