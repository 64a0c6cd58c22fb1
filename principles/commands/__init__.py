"""
Command handlers for the Principles CLI.
"""

from .list import add_list_parser, handle_list_command
from .show import add_show_parser, handle_show_command
from .run import add_run_parser, handle_run_command
from .verify import add_verify_parser, handle_verify_command
from .settings import add_settings_parser, handle_settings_command
from .tui import add_tui_parser, handle_tui_command

__all__ = [
    'add_list_parser', 'handle_list_command',
    'add_show_parser', 'handle_show_command',
    'add_run_parser', 'handle_run_command',
    'add_verify_parser', 'handle_verify_command',
    'add_settings_parser', 'handle_settings_command',
    'add_tui_parser', 'handle_tui_command',
]
