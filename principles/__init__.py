"""
Principles - paired correct/violation examples of software design principles

This package provides the example corpus and a command-line interface for
listing, reading, running and verifying the example pairs.
"""

__version__ = "1.0.0"


def main(*args, **kwargs):
    """Lazy import to avoid CLI startup side effects during help paths."""
    from .main import main as _main

    return _main(*args, **kwargs)


# Define what gets imported with "from principles import *"
__all__ = ["main", "__version__"]
