"""
Tests for running example modules and capturing their output.
"""

import logging

import pytest

from principles.catalog import InvalidVariantError, find_pair, run_pair, run_variant
from principles.modules.dataclasses import ExamplePair, RunResult


def test_run_variant_captures_stdout():
    result = run_variant(find_pair("kiss"), "correct")

    assert isinstance(result, RunResult)
    assert result.success is True
    assert result.error is None
    assert result.slug == "kiss"
    assert result.variant == "correct"
    assert result.output.strip()
    assert result.duration >= 0


def test_run_variant_awaits_coroutine_main():
    pair = find_pair("temporal-decoupling")

    result = run_variant(pair, "correct")

    assert result.success, result.error
    assert "Two concurrent transfers" in result.output
    assert "InsufficientFunds" in result.output


def test_run_variant_reports_failure_instead_of_raising(fake_pair_package, caplog):
    pair = ExamplePair(slug="fake", package=fake_pair_package, title="Fake")

    with caplog.at_level(logging.WARNING, logger="principles.catalog.runner"):
        result = run_variant(pair, "correct")

    assert result.success is False
    assert result.error == "ValueError: boom"
    assert "about to fail" in result.output
    assert "fake_principle_pair.correct failed" in caplog.text


def test_run_variant_missing_module_is_a_failure(tmp_path, monkeypatch):
    pair = ExamplePair(slug="ghost", package="no_such_package_anywhere", title="Ghost")

    result = run_variant(pair, "violation")

    assert result.success is False
    assert "ModuleNotFoundError" in result.error


def test_run_variant_rejects_unknown_variant():
    with pytest.raises(InvalidVariantError):
        run_variant(find_pair("kiss"), "both")


def test_run_pair_keeps_variant_order(fake_pair_package):
    pair = ExamplePair(slug="fake", package=fake_pair_package, title="Fake")

    results = run_pair(pair, ["violation", "correct"])

    assert [r.variant for r in results] == ["violation", "correct"]
    assert results[0].success is True
    assert "awaited main ran" in results[0].output
    assert results[1].success is False


def test_run_pair_defaults_to_both_variants():
    results = run_pair(find_pair("occams-razor"))

    assert [r.variant for r in results] == ["correct", "violation"]
    assert all(r.success for r in results)
