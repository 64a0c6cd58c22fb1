"""
Run example modules and capture what they print.

A failing example is reported in its RunResult; exceptions escaping an
example's main() are never re-raised to the caller.
"""

import asyncio
import contextlib
import importlib
import inspect
import io
import logging
import time
import traceback
from typing import Iterable, List

from principles.catalog.registry import VARIANTS, check_variant
from principles.modules.dataclasses import ExamplePair, RunResult

logger = logging.getLogger(__name__)


def _call_main(module) -> None:
    entry = getattr(module, "main", None)
    if entry is None:
        raise AttributeError(f"{module.__name__} has no main() function")
    if inspect.iscoroutinefunction(entry):
        asyncio.run(entry())
    else:
        entry()


def run_variant(pair: ExamplePair, variant: str) -> RunResult:
    """Import one example module, run its main() and capture its output."""
    check_variant(variant)
    module_name = pair.module_name(variant)
    buffer = io.StringIO()
    started = time.perf_counter()
    error = None

    logger.debug("Running %s", module_name)
    try:
        with contextlib.redirect_stdout(buffer), contextlib.redirect_stderr(buffer):
            module = importlib.import_module(module_name)
            _call_main(module)
    except Exception as exc:  # example failures are reported, not raised
        error = "".join(traceback.format_exception_only(type(exc), exc)).strip()
        logger.warning("%s failed: %s", module_name, error)
        logger.debug("Traceback for %s:\n%s", module_name, traceback.format_exc())

    duration = time.perf_counter() - started
    return RunResult(
        slug=pair.slug,
        variant=variant,
        success=error is None,
        output=buffer.getvalue(),
        error=error,
        duration=duration,
    )


def run_pair(pair: ExamplePair, variants: Iterable[str] = VARIANTS) -> List[RunResult]:
    """Run the requested variants of a pair, in the order given."""
    return [run_variant(pair, variant) for variant in variants]
