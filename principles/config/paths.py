"""Path resolution utilities for Principles.

Provides centralized path resolution with environment variable overrides for testing.
"""

import os
from pathlib import Path


def get_config_dir() -> Path:
    """Get the per-user configuration directory (~/.principles)."""
    return Path.home() / ".principles"


def get_config_path() -> Path:
    """Get the settings file path, respecting PRINCIPLES_CONFIG override.

    Returns:
        Path to the TOML settings file

    Environment Variables:
        PRINCIPLES_CONFIG: Override for the settings file (useful for testing)
    """
    override = os.environ.get('PRINCIPLES_CONFIG')
    if override:
        return Path(override).expanduser()
    return get_config_dir() / "config.toml"
