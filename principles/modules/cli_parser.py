"""
CLI argument parsing for Principles.
"""
import argparse
import importlib

import pyfiglet

from .dataclasses import Colors
from .utils import _filter_suppressed_help, styled_print, print_subheader


class StyledArgumentParser(argparse.ArgumentParser):
    """Custom ArgumentParser that provides styled help output."""

    def __init__(self, *args, show_banner=False, **kwargs):
        """Initialize with optional banner flag."""
        super().__init__(*args, **kwargs)
        self.show_banner = show_banner

    def print_help(self, file=None):
        """Override print_help to use our styled formatter."""
        from principles import __version__
        from principles.config.settings import get_settings

        show_banner = self.show_banner and get_settings().show_banner

        # Only show banner for main parser
        if show_banner:
            ascii_art = pyfiglet.figlet_format("PRINCIPLES", font="small")
            for line in ascii_art.split('\n'):
                if line.strip():
                    styled_print(line, Colors.BRIGHT_CYAN, Colors.BOLD, 0)
            print()

        original_help = _filter_suppressed_help(super().format_help())
        lines = original_help.split('\n')

        if show_banner:
            print_subheader("COMMAND OPTIONS")

        for line in lines:
            if not line.strip():
                continue
            elif line.startswith('usage:'):
                styled_print(line, Colors.BRIGHT_YELLOW, Colors.BOLD, 0)
            elif line.startswith('options:') or line.startswith('optional arguments:') or line.endswith(':'):
                styled_print(line, Colors.BRIGHT_CYAN, Colors.BOLD, 0)
            elif line.startswith('  -') or line.startswith('    -'):
                if line.startswith('    -'):
                    styled_print(line, Colors.BRIGHT_WHITE, None, 4)
                else:
                    styled_print(line, Colors.BRIGHT_YELLOW, None, 0)
            else:
                styled_print(line, Colors.BRIGHT_GREEN, None, 0)

        # Add a footer with version information only for main parser
        if show_banner:
            print()
            styled_print(f" principles v{__version__} ", Colors.BRIGHT_MAGENTA, None, 0)
            styled_print(" Good code next to bad code ", Colors.BRIGHT_RED, Colors.BOLD, 0)


_COMMAND_SPECS = (
    ("principles.commands.list", "add_list_parser"),
    ("principles.commands.show", "add_show_parser"),
    ("principles.commands.run", "add_run_parser"),
    ("principles.commands.verify", "add_verify_parser"),
    ("principles.commands.settings", "add_settings_parser"),
    ("principles.commands.tui", "add_tui_parser"),
)


def _register_command_parsers(subparsers: argparse._SubParsersAction) -> None:
    for module_path, func_name in _COMMAND_SPECS:
        module = importlib.import_module(module_path)
        getattr(module, func_name)(subparsers)


def create_main_parser(*, show_banner: bool = True) -> argparse.ArgumentParser:
    """Create the main argument parser for Principles."""
    from .. import __version__

    parser = StyledArgumentParser(
        prog="principles",
        description="Principles - correct and violation examples of software design principles\n\n"
                    "Short aliases are available for most commands.\n"
                    "Examples: 'principles ls', 'principles r dry', 'principles sh kiss --variant correct'",
        formatter_class=argparse.RawTextHelpFormatter,
        show_banner=show_banner,
        allow_abbrev=False
    )
    parser.add_argument('--version', action='version',
                        version=f'principles {__version__}',
                        help='Show version information')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable ANSI colors for this invocation')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.add_parser('help', aliases=['h'], help='Show help for all commands')

    _register_command_parsers(subparsers)

    return parser
