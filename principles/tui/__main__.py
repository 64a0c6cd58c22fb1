"""
Module entry point for the Principles TUI.

This allows running the TUI with:
  python -m principles.tui [name]
"""

import sys

from .entry import main, parse_args


if __name__ == "__main__":
    args = parse_args()
    sys.exit(main(initial=args.name, verbose=args.verbose))
