"""
Discovery and lookup of example pairs.

Every sub-package of ``principles.examples`` that contains both a
``correct`` and a ``violation`` module is one pair. Metadata comes from the
sub-package's ``__init__`` constants (TITLE, SUMMARY, TAGS, ALIASES).
"""

import difflib
import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Dict, List, Optional

from principles.catalog.errors import (
    AmbiguousPrincipleError,
    InvalidVariantError,
    UnknownPrincipleError,
)
from principles.modules.dataclasses import ExamplePair

logger = logging.getLogger(__name__)

EXAMPLES_PACKAGE = "principles.examples"
VARIANTS = ("correct", "violation")

_cache: Optional[List[ExamplePair]] = None


def slug_for(package_name: str) -> str:
    """Turn a package name (last dotted part) into its command-line slug."""
    return package_name.rsplit(".", 1)[-1].replace("_", "-")


def _load_pair(info: pkgutil.ModuleInfo) -> Optional[ExamplePair]:
    package_name = f"{EXAMPLES_PACKAGE}.{info.name}"
    package = importlib.import_module(package_name)
    package_dir = Path(package.__file__).parent

    missing = [v for v in VARIANTS if not (package_dir / f"{v}.py").exists()]
    if missing:
        logger.warning("Skipping %s: missing %s module(s)", package_name, ", ".join(missing))
        return None

    slug = slug_for(info.name)
    return ExamplePair(
        slug=slug,
        package=package_name,
        title=getattr(package, "TITLE", slug.replace("-", " ").title()),
        summary=getattr(package, "SUMMARY", (package.__doc__ or "").strip()),
        tags=tuple(getattr(package, "TAGS", ())),
        aliases=tuple(getattr(package, "ALIASES", ())),
    )


def discover_pairs(refresh: bool = False) -> List[ExamplePair]:
    """Return every example pair, sorted by slug."""
    global _cache
    if _cache is not None and not refresh:
        return list(_cache)

    examples = importlib.import_module(EXAMPLES_PACKAGE)
    pairs = []
    for info in pkgutil.iter_modules(examples.__path__):
        if not info.ispkg:
            continue
        pair = _load_pair(info)
        if pair is not None:
            pairs.append(pair)

    pairs.sort(key=lambda p: p.slug)
    logger.debug("Discovered %d example pairs", len(pairs))
    _cache = pairs
    return list(pairs)


def _name_index(pairs: List[ExamplePair]) -> Dict[str, ExamplePair]:
    index = {}
    for pair in pairs:
        index[pair.slug] = pair
        index[pair.slug.replace("-", "_")] = pair
        index[pair.package.rsplit(".", 1)[-1]] = pair
        for alias in pair.aliases:
            index[alias.lower()] = pair
    return index


def find_pair(name: str) -> ExamplePair:
    """
    Resolve a slug, package name, alias or unique slug prefix to a pair.

    Raises:
        UnknownPrincipleError: nothing matches
        AmbiguousPrincipleError: a prefix matches several pairs
    """
    pairs = discover_pairs()
    key = name.strip().lower().replace("_", "-")
    if key.endswith("-principle"):
        key = key[: -len("-principle")]

    index = _name_index(pairs)
    if key in index:
        return index[key]
    if key.replace("-", "_") in index:
        return index[key.replace("-", "_")]

    prefixed = [p for p in pairs if p.slug.startswith(key)]
    if len(prefixed) == 1:
        return prefixed[0]
    if len(prefixed) > 1:
        raise AmbiguousPrincipleError(name, [p.slug for p in prefixed])

    suggestions = difflib.get_close_matches(key, [p.slug for p in pairs], n=3, cutoff=0.5)
    raise UnknownPrincipleError(name, suggestions)


def check_variant(variant: str) -> str:
    """Return ``variant`` if valid, else raise InvalidVariantError."""
    if variant not in VARIANTS:
        raise InvalidVariantError(variant)
    return variant


def expand_variants(choice: str) -> List[str]:
    """Map a CLI choice (correct, violation or both) to concrete variants."""
    if choice == "both":
        return list(VARIANTS)
    return [check_variant(choice)]


def source_path(pair: ExamplePair, variant: str) -> Path:
    check_variant(variant)
    package = importlib.import_module(pair.package)
    return Path(package.__file__).parent / f"{variant}.py"


def read_source(pair: ExamplePair, variant: str) -> str:
    """Return the source text of one example module."""
    return source_path(pair, variant).read_text(encoding="utf-8")


def filter_by_tag(pairs: List[ExamplePair], tag: Optional[str]) -> List[ExamplePair]:
    if not tag:
        return pairs
    wanted = tag.lower()
    return [p for p in pairs if wanted in (t.lower() for t in p.tags)]
