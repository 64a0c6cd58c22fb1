"""
Run command for the Principles CLI.
"""

import argparse

from principles.catalog import CatalogError, expand_variants, find_pair, run_pair
from principles.config.settings import VALID_VARIANTS, get_settings
from principles.modules.utils import print_error, print_header, print_subheader, print_success


def add_run_parser(subparsers) -> argparse.ArgumentParser:
    """Add run command parser."""
    run_parser = subparsers.add_parser(
        'run',
        aliases=['r'],
        help='Run the correct and/or violation example of a principle'
    )
    run_parser.add_argument(
        'name',
        help='Principle slug, alias or unique prefix'
    )
    run_parser.add_argument(
        '--variant',
        choices=VALID_VARIANTS,
        help='Which example to run (defaults to the default_variant setting)'
    )
    return run_parser


def handle_run_command(args: argparse.Namespace) -> int:
    """Handle run command."""
    try:
        pair = find_pair(args.name)
        variants = expand_variants(args.variant or get_settings().default_variant)
    except CatalogError as e:
        print_error(f"Error: {e}")
        return 1

    print_header(pair.title)
    exit_code = 0
    for result in run_pair(pair, variants):
        print_subheader(result.variant.upper())
        print()
        print(result.output.rstrip())
        if result.success:
            print_success(f"[{result.variant} finished in {result.duration:.3f}s]", 2)
        else:
            print_error(f"[{result.variant} failed: {result.error}]", 2)
            exit_code = 1
    return exit_code
