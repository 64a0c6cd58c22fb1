"""
Import-safe entrypoint for the Principles TUI.

The rest of the CLI must keep working when Textual cannot be imported.
"""

import argparse
import sys

from principles.catalog import CatalogError
from principles.modules.utils import print_error


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Principles TUI")
    parser.add_argument("name", nargs="?", help="Principle to select on start")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose error output")
    return parser.parse_args(argv)


def _print_textual_missing():
    message = (
        "The terminal UI requires 'textual'.\n"
        "Install it with: pip install textual\n"
    )
    print(message, file=sys.stderr)


def main(initial=None, verbose=False) -> int:
    """Start the TUI; returns a process exit code."""
    try:
        from principles.tui.app import main as textual_main
    except ModuleNotFoundError as exc:
        if exc.name and exc.name.split(".")[0] == "textual":
            if verbose:
                raise
            _print_textual_missing()
            return 1
        raise

    try:
        textual_main(initial=initial)
    except CatalogError as e:
        print_error(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    args = parse_args()
    sys.exit(main(initial=args.name, verbose=args.verbose))
