"""
Dataclasses and type definitions shared by the Principles CLI.
"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ExamplePair:
    """One principle with its correct and violation example modules."""
    slug: str            # e.g. "command-query-separation"
    package: str         # e.g. "principles.examples.command_query_separation"
    title: str
    summary: str = ""
    tags: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()

    def module_name(self, variant: str) -> str:
        return f"{self.package}.{variant}"

    def source_path(self, variant: str):
        from principles.catalog.registry import source_path

        return source_path(self, variant)


@dataclass
class RunResult:
    """Outcome of running a single example variant."""
    slug: str
    variant: str
    success: bool
    output: str = ""
    error: Optional[str] = None
    duration: float = 0.0


class Colors:
    # Text colors
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    # Bright colors
    BRIGHT_RED = '\033[91m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'

    # Formatting
    BOLD = '\033[1m'
    DIM = '\033[2m'
    ITALIC = '\033[3m'

    # Reset
    RESET = '\033[0m'
