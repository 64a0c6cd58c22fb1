"""
Verify command: run every example and report which ones fail.
"""

import argparse
import logging

from principles.catalog import CatalogError, VARIANTS, discover_pairs, find_pair, run_variant
from principles.config.settings import get_settings
from principles.display.table_renderer import render_results_table
from principles.modules.utils import print_error, print_success, print_warning

logger = logging.getLogger(__name__)


def add_verify_parser(subparsers) -> argparse.ArgumentParser:
    """Add verify command parser."""
    verify_parser = subparsers.add_parser(
        'verify',
        help='Run all (or the named) example pairs and report failures'
    )
    verify_parser.add_argument(
        'names',
        nargs='*',
        help='Principle slugs to verify (default: all)'
    )
    verify_parser.add_argument(
        '--fail-fast',
        action='store_true',
        help='Stop at the first failing example'
    )
    return verify_parser


def handle_verify_command(args: argparse.Namespace) -> int:
    """Handle verify command."""
    try:
        if args.names:
            pairs = [find_pair(name) for name in args.names]
        else:
            pairs = discover_pairs()
    except CatalogError as e:
        print_error(f"Error: {e}")
        return 1

    skipped = set(get_settings().skip)
    rows = []
    failures = []
    for pair in pairs:
        if pair.slug in skipped and not args.names:
            logger.info("Skipping %s (listed in settings)", pair.slug)
            rows.extend({'slug': pair.slug, 'variant': v, 'status': 'skip', 'time': '-'} for v in VARIANTS)
            continue

        stop = False
        for variant in VARIANTS:
            result = run_variant(pair, variant)
            rows.append({
                'slug': pair.slug,
                'variant': variant,
                'status': 'pass' if result.success else 'fail',
                'time': f"{result.duration:.3f}s",
            })
            if not result.success:
                failures.append(result)
                if args.fail_fast:
                    stop = True
                    break
        if stop:
            break

    for line in render_results_table(rows):
        print(line)

    skipped_slugs = sorted({row["slug"] for row in rows if row["status"] == "skip"})
    if skipped_slugs:
        print_warning(f"Skipped (settings): {', '.join(skipped_slugs)}")

    if failures:
        for result in failures:
            print_error(f"{result.slug} [{result.variant}]: {result.error}")
        return 1

    executed = [row for row in rows if row["status"] != "skip"]
    print_success(f"All {len(executed)} example runs passed")
    return 0
