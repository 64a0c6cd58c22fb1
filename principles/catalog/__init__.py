"""
Example pair catalog: discovery, lookup and execution.
"""

from .errors import (
    CatalogError,
    UnknownPrincipleError,
    AmbiguousPrincipleError,
    InvalidVariantError
)
from .registry import (
    VARIANTS,
    discover_pairs,
    find_pair,
    check_variant,
    expand_variants,
    filter_by_tag,
    read_source,
    source_path
)
from .runner import run_variant, run_pair

__all__ = [
    'CatalogError',
    'UnknownPrincipleError',
    'AmbiguousPrincipleError',
    'InvalidVariantError',
    'VARIANTS',
    'discover_pairs',
    'find_pair',
    'check_variant',
    'expand_variants',
    'filter_by_tag',
    'read_source',
    'source_path',
    'run_variant',
    'run_pair'
]
