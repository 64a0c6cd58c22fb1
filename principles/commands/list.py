"""
List command for the Principles CLI.
"""

import argparse
import json

from principles.catalog import discover_pairs, filter_by_tag
from principles.config.settings import VALID_LIST_FORMATS, get_settings
from principles.display.table_renderer import render_pair_table


def add_list_parser(subparsers) -> argparse.ArgumentParser:
    """Add list command parser."""
    list_parser = subparsers.add_parser(
        'list',
        aliases=['ls'],
        help='List all principle example pairs'
    )
    list_parser.add_argument(
        '--tag',
        help='Only show pairs carrying this tag'
    )
    list_parser.add_argument(
        '--format',
        choices=VALID_LIST_FORMATS,
        help='Output format (defaults to the list_format setting)'
    )
    return list_parser


def handle_list_command(args: argparse.Namespace) -> int:
    """Handle list command."""
    pairs = filter_by_tag(discover_pairs(), getattr(args, 'tag', None))
    output_format = getattr(args, 'format', None) or get_settings().list_format

    if output_format == 'json':
        payload = [
            {
                'slug': pair.slug,
                'title': pair.title,
                'summary': pair.summary,
                'tags': list(pair.tags),
                'aliases': list(pair.aliases),
            }
            for pair in pairs
        ]
        print(json.dumps(payload, indent=2))
        return 0

    if output_format == 'plain':
        for pair in pairs:
            print(f"{pair.slug}\t{pair.title}")
        return 0

    rows = [
        {
            'idx': idx,
            'slug': pair.slug,
            'title': pair.title,
            'tags': ", ".join(pair.tags),
        }
        for idx, pair in enumerate(pairs, 1)
    ]
    for line in render_pair_table(rows):
        print(line)
    return 0
