"""
Package init file for principles.config module.
Exports the Settings class and related functions.
"""

from .settings import (
    Settings,
    InvalidSettingError,
    create_default_config,
    get_settings,
    set_settings
)
from .paths import (
    get_config_dir,
    get_config_path
)

__all__ = [
    'Settings',
    'InvalidSettingError',
    'create_default_config',
    'get_settings',
    'set_settings',
    'get_config_dir',
    'get_config_path'
]
