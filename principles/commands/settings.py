"""
Settings command implementation for the Principles CLI.

Commands:
- principles settings show - Show all settings
- principles settings get <key> - Get a single setting value
- principles settings set <key> <value> - Set a single setting value
- principles settings reset - Reset all settings to defaults
"""

import argparse
import json

from principles.config.paths import get_config_path
from principles.config.settings import InvalidSettingError, create_default_config, get_settings, set_settings
from principles.modules.utils import print_error, print_success


def add_settings_parser(subparsers) -> argparse.ArgumentParser:
    """Add settings command parser."""
    settings_parser = subparsers.add_parser(
        'settings',
        help='Show or change CLI settings'
    )
    settings_subparsers = settings_parser.add_subparsers(
        dest='settings_subcommand',
        help='Settings subcommands'
    )

    show_parser = settings_subparsers.add_parser('show', aliases=['list', 'ls'], help='Show all settings')
    show_parser.add_argument('--json', action='store_true', help='Output as JSON')

    get_parser = settings_subparsers.add_parser('get', help='Get a single setting')
    get_parser.add_argument('key', help='Setting key')

    set_parser = settings_subparsers.add_parser('set', help='Set a single setting')
    set_parser.add_argument('key', help='Setting key')
    set_parser.add_argument('value', help='New value (comma-separated for lists)')

    settings_subparsers.add_parser('reset', help='Reset all settings to defaults')

    return settings_parser


def format_value_for_display(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ", ".join(value) if value else "(empty)"
    return str(value)


def show_settings(args) -> int:
    settings = get_settings()
    if getattr(args, 'json', False):
        print(json.dumps(settings.to_dict(), indent=2))
        return 0

    print(f"Settings file: {get_config_path()}")
    for key, value in settings.to_dict().items():
        print(f"  {key}: {format_value_for_display(value)}")
    return 0


def get_setting(args) -> int:
    try:
        value = get_settings().get(args.key)
    except InvalidSettingError as e:
        print_error(f"Error: {e}")
        return 1
    print(format_value_for_display(value))
    return 0


def set_setting(args) -> int:
    settings = get_settings()
    try:
        settings.set(args.key, args.value)
    except InvalidSettingError as e:
        print_error(f"Error: {e}")
        return 1

    if not settings.save():
        print_error(f"Error: could not write {get_config_path()}")
        return 1
    print_success(f"{args.key} = {format_value_for_display(settings.get(args.key))}")
    return 0


def reset_settings(args) -> int:
    settings = create_default_config()
    if not settings.save():
        print_error(f"Error: could not write {get_config_path()}")
        return 1
    set_settings(settings)
    print_success("Settings reset to defaults")
    return 0


def handle_settings_command(args: argparse.Namespace) -> int:
    """Handle settings command."""
    subcommand = getattr(args, 'settings_subcommand', None)

    if subcommand in (None, 'show', 'list', 'ls'):
        return show_settings(args)
    elif subcommand == 'get':
        return get_setting(args)
    elif subcommand == 'set':
        return set_setting(args)
    elif subcommand == 'reset':
        return reset_settings(args)
    else:
        print_error(f"Unknown settings subcommand: {subcommand}")
        return 1
