"""
Tests for the TOML settings file.
"""

import pytest
import toml

from principles.config.paths import get_config_path
from principles.config.settings import (
    InvalidSettingError,
    Settings,
    create_default_config,
    get_settings,
    set_settings,
)


def test_default_values():
    settings = create_default_config()

    assert settings.color_output is True
    assert settings.unicode_symbols is True
    assert settings.show_banner is True
    assert settings.list_format == "table"
    assert settings.default_variant == "both"
    assert settings.skip == []
    assert settings.log_level == "WARNING"
    assert settings.validate() is True


def test_config_path_follows_environment(isolate_config):
    assert get_config_path() == isolate_config


def test_missing_file_yields_defaults(isolate_config):
    assert not isolate_config.exists()
    assert Settings.load() == Settings()


def test_save_and_load_round_trip(isolate_config):
    settings = Settings(default_variant="violation", skip=["backpressure-first"], color_output=False)

    assert settings.save() is True
    assert isolate_config.exists()
    assert toml.load(isolate_config)["principles"]["default_variant"] == "violation"

    loaded = Settings.load()
    assert loaded.default_variant == "violation"
    assert loaded.skip == ["backpressure-first"]
    assert loaded.color_output is False


def test_load_invalid_toml_falls_back_to_defaults(isolate_config, caplog):
    isolate_config.parent.mkdir(parents=True)
    isolate_config.write_text('color_output = "unterminated\n', encoding="utf-8")

    assert Settings.load() == Settings()
    assert "Could not load settings" in caplog.text


def test_load_bad_values_falls_back_to_defaults(isolate_config):
    isolate_config.parent.mkdir(parents=True)
    isolate_config.write_text('[principles]\ndefault_variant = "sideways"\n', encoding="utf-8")

    assert Settings.load().default_variant == "both"


def test_load_non_string_log_level_falls_back_to_defaults(isolate_config, caplog):
    isolate_config.parent.mkdir(parents=True)
    isolate_config.write_text("[principles]\nlog_level = 10\n", encoding="utf-8")

    with caplog.at_level("WARNING", logger="principles.config.settings"):
        settings = Settings.load()

    assert settings.log_level == "WARNING"
    assert "Could not load settings" in caplog.text
    with pytest.raises(InvalidSettingError, match="log_level"):
        Settings(log_level=10).validate()


def test_load_unknown_key_falls_back_to_defaults(isolate_config):
    isolate_config.parent.mkdir(parents=True)
    isolate_config.write_text('[principles]\nfavourite_colour = "blue"\n', encoding="utf-8")

    assert Settings.load() == Settings()


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(InvalidSettingError, match="favourite_colour"):
        Settings.from_dict({"favourite_colour": "blue"})


def test_validate_rejects_bad_enums():
    settings = create_default_config()

    settings.list_format = "yaml"
    with pytest.raises(InvalidSettingError):
        settings.validate()

    settings.list_format = "json"
    settings.log_level = "LOUD"
    with pytest.raises(InvalidSettingError):
        settings.validate()


def test_set_coerces_strings():
    settings = create_default_config()

    settings.set("color_output", "off")
    settings.set("skip", "dry, kiss ,")
    settings.set("log_level", "debug")
    settings.set("default_variant", " correct ")

    assert settings.color_output is False
    assert settings.skip == ["dry", "kiss"]
    assert settings.log_level == "DEBUG"
    assert settings.default_variant == "correct"


def test_set_invalid_value_keeps_previous():
    settings = create_default_config()

    with pytest.raises(InvalidSettingError):
        settings.set("default_variant", "sideways")
    with pytest.raises(InvalidSettingError):
        settings.set("show_banner", "maybe")

    assert settings.default_variant == "both"
    assert settings.show_banner is True


def test_get_and_set_unknown_key():
    settings = create_default_config()

    with pytest.raises(InvalidSettingError):
        settings.get("nope")
    with pytest.raises(InvalidSettingError):
        settings.set("nope", "1")


def test_process_wide_instance(isolate_config):
    Settings(list_format="plain").save()

    assert get_settings().list_format == "plain"
    assert get_settings() is get_settings()

    replacement = Settings(list_format="json")
    set_settings(replacement)
    assert get_settings() is replacement
