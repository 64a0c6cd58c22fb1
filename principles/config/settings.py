"""
Principles Settings Module

This module implements the settings management system for the Principles CLI,
storing configuration as TOML in ~/.principles/config.toml (or the file named
by PRINCIPLES_CONFIG).
"""

import logging
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml

from principles.config.paths import get_config_path

logger = logging.getLogger(__name__)

VALID_VARIANTS = ('correct', 'violation', 'both')
VALID_LIST_FORMATS = ('table', 'plain', 'json')
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class InvalidSettingError(Exception):
    """Exception raised when a setting fails validation."""
    pass


@dataclass
class Settings:
    # Display Settings
    color_output: bool = True
    unicode_symbols: bool = True
    show_banner: bool = True
    list_format: str = "table"

    # Run Settings
    default_variant: str = "both"
    skip: List[str] = field(default_factory=list)

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def keys(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Settings':
        """
        Load settings from the TOML config file.

        A missing file yields defaults. A file that cannot be parsed or that
        holds invalid values is reported and also yields defaults.

        Args:
            config_path: Path to config file (defaults to get_config_path())

        Returns:
            Loaded Settings instance
        """
        if config_path is None:
            config_path = get_config_path()
        config_path = Path(config_path)

        if not config_path.exists():
            return cls()

        try:
            data = toml.load(config_path)
            settings = cls.from_dict(data.get('principles', data))
            settings.validate()
            return settings
        except (OSError, toml.TomlDecodeError, InvalidSettingError, TypeError) as e:
            logger.warning("Could not load settings from %s: %s", config_path, e)
            return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """Create Settings from a flat dictionary, rejecting unknown keys."""
        unknown = sorted(set(data) - set(cls.keys()))
        if unknown:
            raise InvalidSettingError(f"Unknown setting(s): {', '.join(unknown)}")
        return cls(**data)

    def save(self, config_path: Optional[Path] = None) -> bool:
        """
        Save settings to the TOML config file.

        Returns:
            True if save was successful, False otherwise
        """
        if config_path is None:
            config_path = get_config_path()
        config_path = Path(config_path)

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, 'w', encoding='utf-8') as f:
                toml.dump({'principles': self.to_dict()}, f)
            return True
        except OSError as e:
            logger.error("Error saving settings to %s: %s", config_path, e)
            return False

    def get(self, key: str) -> Any:
        """Get a setting value by key."""
        if key not in self.keys():
            raise InvalidSettingError(f"Unknown setting: {key}")
        return getattr(self, key)

    def set(self, key: str, value: Any) -> None:
        """
        Set a setting value, converting string input to the field's type.

        Raises:
            InvalidSettingError: if the key is unknown or the value invalid
        """
        if key not in self.keys():
            raise InvalidSettingError(f"Unknown setting: {key}")

        current = getattr(self, key)
        if isinstance(value, str):
            value = _coerce(key, value, current)

        previous = current
        setattr(self, key, value)
        try:
            self.validate()
        except InvalidSettingError:
            setattr(self, key, previous)
            raise

    def validate(self) -> bool:
        """
        Validate all settings.

        Returns:
            True if valid

        Raises:
            InvalidSettingError: if any setting is invalid
        """
        for name in ('color_output', 'unicode_symbols', 'show_banner'):
            if not isinstance(getattr(self, name), bool):
                raise InvalidSettingError(f"{name} must be true or false")

        if self.default_variant not in VALID_VARIANTS:
            raise InvalidSettingError(
                f"default_variant must be one of {', '.join(VALID_VARIANTS)}, got '{self.default_variant}'"
            )
        if self.list_format not in VALID_LIST_FORMATS:
            raise InvalidSettingError(
                f"list_format must be one of {', '.join(VALID_LIST_FORMATS)}, got '{self.list_format}'"
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise InvalidSettingError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got '{self.log_level}'"
            )
        if not isinstance(self.skip, list) or not all(isinstance(s, str) for s in self.skip):
            raise InvalidSettingError("skip must be a list of principle slugs")
        return True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _coerce(key: str, raw: str, current: Any) -> Any:
    if isinstance(current, bool):
        lowered = raw.strip().lower()
        if lowered in ('true', 'yes', 'on', '1'):
            return True
        if lowered in ('false', 'no', 'off', '0'):
            return False
        raise InvalidSettingError(f"{key} must be true or false, got '{raw}'")
    if isinstance(current, list):
        return [item.strip() for item in raw.split(',') if item.strip()]
    if key == 'log_level':
        return raw.strip().upper()
    return raw.strip()


def create_default_config() -> Settings:
    """Create a Settings instance holding the defaults."""
    return Settings()


# Process-wide settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the process-wide settings instance, loading it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def set_settings(settings: Optional[Settings]) -> None:
    """Replace (or with None, reset) the process-wide settings instance."""
    global _settings
    _settings = settings
