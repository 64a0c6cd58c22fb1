#!/usr/bin/env python3
"""
Principles CLI

This is the main entry point for listing, reading, running and verifying the
example pairs.
"""

import logging
import sys
from typing import Optional, Sequence

from principles.config.settings import get_settings
from principles.modules.cli_parser import create_main_parser


def configure_logging(verbose: bool) -> None:
    """Configure root logging from --verbose or the log_level setting."""
    level_name = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the Principles CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    if args.no_color:
        get_settings().color_output = False

    if args.command in (None, 'help', 'h'):
        parser.print_help()
        return 0

    from principles.commands import (
        handle_list_command,
        handle_show_command,
        handle_run_command,
        handle_verify_command,
        handle_settings_command,
        handle_tui_command,
    )

    handlers = {
        'list': handle_list_command,
        'ls': handle_list_command,
        'show': handle_show_command,
        'sh': handle_show_command,
        'run': handle_run_command,
        'r': handle_run_command,
        'verify': handle_verify_command,
        'settings': handle_settings_command,
        'tui': handle_tui_command,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
