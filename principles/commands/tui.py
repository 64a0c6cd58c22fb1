"""
TUI command: open the textual example browser.
"""

import argparse


def add_tui_parser(subparsers) -> argparse.ArgumentParser:
    """Add tui command parser."""
    tui_parser = subparsers.add_parser(
        'tui',
        help='Browse and run the example pairs in a terminal UI'
    )
    tui_parser.add_argument(
        'name',
        nargs='?',
        help='Principle to select on start'
    )
    return tui_parser


def handle_tui_command(args: argparse.Namespace) -> int:
    """Handle tui command."""
    from principles.tui.entry import main as tui_main

    return tui_main(initial=getattr(args, 'name', None), verbose=getattr(args, 'verbose', False))
