"""
Show command for the Principles CLI.
"""

import argparse

from principles.catalog import CatalogError, expand_variants, find_pair, read_source
from principles.config.settings import VALID_VARIANTS, get_settings
from principles.modules.utils import print_error, print_header, print_info, print_subheader


def add_show_parser(subparsers) -> argparse.ArgumentParser:
    """Add show command parser."""
    show_parser = subparsers.add_parser(
        'show',
        aliases=['sh'],
        help='Show the summary and source of a principle pair'
    )
    show_parser.add_argument(
        'name',
        help='Principle slug, alias or unique prefix'
    )
    show_parser.add_argument(
        '--variant',
        choices=VALID_VARIANTS,
        help='Which example to show (defaults to the default_variant setting)'
    )
    show_parser.add_argument(
        '--summary-only',
        action='store_true',
        help='Print the title and summary without source'
    )
    return show_parser


def handle_show_command(args: argparse.Namespace) -> int:
    """Handle show command."""
    try:
        pair = find_pair(args.name)
        variants = expand_variants(args.variant or get_settings().default_variant)
    except CatalogError as e:
        print_error(f"Error: {e}")
        return 1

    print_header(pair.title)
    print_info(pair.summary)
    if pair.tags:
        print_info(f"Tags: {', '.join(pair.tags)}")
    if args.summary_only:
        return 0

    for variant in variants:
        print_subheader(f"{variant.upper()} ({pair.module_name(variant)})")
        print()
        print(read_source(pair, variant).rstrip())
    return 0
