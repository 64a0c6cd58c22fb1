"""
Utility functions for the Principles CLI.
"""
import sys

from .dataclasses import Colors


def _colors_enabled() -> bool:
    # Only apply colors if we're in a terminal that supports them
    if not (hasattr(sys.stdout, 'isatty') and sys.stdout.isatty()):
        return False
    from principles.config.settings import get_settings
    return get_settings().color_output


def styled_print(text, color=None, style=None, indent=0):
    """
    Print styled text with optional color, style, and indentation.

    Args:
        text (str): Text to print
        color (str): Color from Colors class
        style (str): Style from Colors class
        indent (int): Number of spaces to indent
    """
    indent_str = " " * indent
    if _colors_enabled():
        formatted_text = f"{indent_str}{color or ''}{style or ''}{text}{Colors.RESET}"
    else:
        formatted_text = f"{indent_str}{text}"
    print(formatted_text)


def print_header(text):
    """Print a styled header with separator lines."""
    styled_print("\n" + "="*60, Colors.BRIGHT_CYAN, Colors.BOLD)
    styled_print(text.center(60), Colors.BRIGHT_CYAN, Colors.BOLD)
    styled_print("="*60, Colors.BRIGHT_CYAN, Colors.BOLD)


def print_subheader(text):
    """Print a styled subheader."""
    styled_print(f"\n{text}", Colors.CYAN, Colors.BOLD, 2)


def print_success(text, indent=0):
    """Print success message in green."""
    styled_print(text, Colors.GREEN, Colors.BOLD, indent)


def print_warning(text, indent=0):
    """Print warning message in yellow."""
    styled_print(text, Colors.YELLOW, Colors.BOLD, indent)


def print_error(text, indent=0):
    """Print error message in red."""
    styled_print(text, Colors.RED, Colors.BOLD, indent)


def print_info(text, indent=0):
    """Print info message in blue."""
    styled_print(text, Colors.BLUE, None, indent)


def _filter_suppressed_help(help_text: str) -> str:
    """Remove lines argparse leaves behind for suppressed options."""
    lines = help_text.split('\n')
    return '\n'.join(line for line in lines if 'SUPPRESS' not in line)
