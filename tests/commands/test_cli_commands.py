"""
Tests for the principles command line, driven through main(argv).
"""

import json

import pytest

from principles import __version__
from principles.catalog import find_pair
from principles.config.settings import Settings, get_settings
from principles.main import main
from principles.modules.dataclasses import RunResult


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert f"principles {__version__}" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "usage: principles" in out
    assert "verify" in out
    assert f"principles v{__version__}" in out


def test_help_command_without_banner(capsys):
    Settings(show_banner=False).save()

    assert main(["help"]) == 0

    out = capsys.readouterr().out
    assert "usage: principles" in out
    assert "COMMAND OPTIONS" not in out


def test_list_plain(capsys):
    assert main(["list", "--format", "plain"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 44
    assert "kiss\tKISS" in lines


def test_list_json(capsys):
    assert main(["ls", "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert len(payload) == 44
    dry = next(item for item in payload if item["slug"] == "dry")
    assert dry["title"] == "Don't Repeat Yourself"
    assert dry["aliases"] == ["dont-repeat-yourself"]
    assert dry["tags"] == ["maintainability"]


def test_list_by_tag(capsys):
    assert main(["list", "--tag", "solid", "--format", "plain"]) == 0

    slugs = [line.split("\t")[0] for line in capsys.readouterr().out.strip().splitlines()]
    assert slugs == [
        "dependency-inversion",
        "interface-segregation",
        "liskov-substitution",
        "open-closed",
        "single-responsibility",
    ]


def test_list_table_uses_format_setting(capsys):
    assert main(["--no-color", "list"]) == 0

    out = capsys.readouterr().out
    assert "Total: 44 principles" in out
    assert "\033[" not in out
    assert get_settings().color_output is False


def test_list_format_from_settings(capsys):
    Settings(list_format="json").save()

    assert main(["list"]) == 0

    assert len(json.loads(capsys.readouterr().out)) == 44


def test_show_summary_only(capsys):
    assert main(["show", "kiss", "--summary-only"]) == 0

    out = capsys.readouterr().out
    assert "KISS" in out
    assert "A calculator is four functions" in out
    assert "Tags: simplicity" in out
    assert "def main" not in out


def test_show_one_variant(capsys):
    assert main(["sh", "keep-it-simple", "--variant", "violation"]) == 0

    out = capsys.readouterr().out
    assert "VIOLATION (principles.examples.kiss.violation)" in out
    assert "CORRECT (" not in out
    assert "def main" in out


def test_show_unknown_principle(capsys):
    assert main(["show", "encapsulaton"]) == 1

    out = capsys.readouterr().out
    assert "Unknown principle" in out
    assert "encapsulation" in out


def test_run_both_variants(capsys):
    assert main(["run", "kiss"]) == 0

    out = capsys.readouterr().out
    assert "Addition: 5 + 3 = 8" in out
    assert "[correct finished in" in out
    assert "[violation finished in" in out


def test_run_uses_default_variant_setting(capsys):
    Settings(default_variant="correct").save()

    assert main(["r", "kiss"]) == 0

    out = capsys.readouterr().out
    assert "[correct finished in" in out
    assert "[violation" not in out


def test_run_ambiguous_name(capsys):
    assert main(["run", "de"]) == 1
    assert "Ambiguous principle" in capsys.readouterr().out


def test_run_reports_failed_example(capsys, monkeypatch):
    def failing_run_pair(pair, variants):
        return [RunResult(pair.slug, v, False, "partial output\n", "RuntimeError: nope", 0.01) for v in variants]

    monkeypatch.setattr("principles.commands.run.run_pair", failing_run_pair)

    assert main(["run", "kiss", "--variant", "correct"]) == 1

    out = capsys.readouterr().out
    assert "partial output" in out
    assert "[correct failed: RuntimeError: nope]" in out


def test_verify_named_pairs(capsys):
    assert main(["--no-color", "verify", "kiss", "dry"]) == 0

    out = capsys.readouterr().out
    assert "All 4 example runs passed" in out


def test_verify_skips_slugs_from_settings(capsys, monkeypatch):
    Settings(skip=["kiss"]).save()
    monkeypatch.setattr(
        "principles.commands.verify.discover_pairs",
        lambda: [find_pair("kiss"), find_pair("occams-razor")],
    )

    assert main(["--no-color", "verify"]) == 0

    out = capsys.readouterr().out
    assert "Skip" in out
    assert "Skipped (settings): kiss" in out
    assert "All 2 example runs passed" in out


def test_verify_fail_fast(capsys, monkeypatch):
    calls = []

    def failing_run_variant(pair, variant):
        calls.append((pair.slug, variant))
        return RunResult(pair.slug, variant, False, "", "AssertionError", 0.0)

    monkeypatch.setattr("principles.commands.verify.run_variant", failing_run_variant)

    assert main(["--no-color", "verify", "kiss", "dry", "--fail-fast"]) == 1

    out = capsys.readouterr().out
    assert calls == [("kiss", "correct")]
    assert "kiss [correct]: AssertionError" in out


def test_settings_set_get_reset(capsys, isolate_config):
    assert main(["settings", "set", "default_variant", "violation"]) == 0
    assert isolate_config.exists()
    assert Settings.load().default_variant == "violation"

    capsys.readouterr()
    assert main(["settings", "get", "default_variant"]) == 0
    assert capsys.readouterr().out.strip() == "violation"

    assert main(["settings", "reset"]) == 0
    assert Settings.load().default_variant == "both"


def test_settings_show_json(capsys):
    assert main(["settings", "show", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["list_format"] == "table"
    assert payload["skip"] == []


def test_settings_show_plain(capsys, isolate_config):
    assert main(["settings"]) == 0

    out = capsys.readouterr().out
    assert f"Settings file: {isolate_config}" in out
    assert "skip: (empty)" in out
    assert "color_output: true" in out


def test_settings_rejects_bad_input(capsys, isolate_config):
    assert main(["settings", "set", "list_format", "yaml"]) == 1
    assert main(["settings", "get", "nope"]) == 1

    out = capsys.readouterr().out
    assert "list_format must be one of" in out
    assert "Unknown setting: nope" in out
    assert not isolate_config.exists()


def test_tui_unknown_name_exits_before_opening(capsys):
    assert main(["tui", "no-such-principle-here"]) == 1
    assert "Unknown principle" in capsys.readouterr().out
