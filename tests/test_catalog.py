"""
Tests for example pair discovery and lookup.
"""

import logging

import pytest

from principles.catalog import (
    AmbiguousPrincipleError,
    InvalidVariantError,
    UnknownPrincipleError,
    VARIANTS,
    check_variant,
    discover_pairs,
    expand_variants,
    filter_by_tag,
    find_pair,
    read_source,
    source_path,
)
from principles.catalog import registry


def test_discover_pairs_finds_every_principle():
    pairs = discover_pairs()
    slugs = [p.slug for p in pairs]

    assert len(pairs) == 44
    assert slugs == sorted(slugs)
    assert "temporal-decoupling" in slugs
    assert "dry" in slugs


def test_every_pair_has_metadata():
    for pair in discover_pairs():
        assert pair.title, pair.slug
        assert pair.summary, pair.slug
        assert pair.tags, pair.slug
        assert pair.package == "principles.examples." + pair.slug.replace("-", "_")


def test_aliases_are_unique_and_never_shadow_a_slug():
    pairs = discover_pairs()
    slugs = {p.slug for p in pairs}
    seen = set()
    for pair in pairs:
        for alias in pair.aliases:
            assert alias not in slugs, alias
            assert alias not in seen, alias
            seen.add(alias)


def test_discover_pairs_is_cached_until_refresh():
    first = discover_pairs()
    assert discover_pairs() == first
    assert discover_pairs(refresh=True) == first


def test_find_pair_by_slug_package_name_and_alias():
    assert find_pair("liskov-substitution").slug == "liskov-substitution"
    assert find_pair("liskov_substitution").slug == "liskov-substitution"
    assert find_pair("LSP").slug == "liskov-substitution"
    assert find_pair("dsdm").slug == "dynamic-systems-development-method"
    assert find_pair("you-arent-gonna-need-it").slug == "yagni"


def test_find_pair_strips_principle_suffix():
    assert find_pair("open-closed-principle").slug == "open-closed"
    assert find_pair("Open_Closed_Principle").slug == "open-closed"


def test_find_pair_by_unique_prefix():
    assert find_pair("graceful").slug == "graceful-degradation"
    assert find_pair("temporal").slug == "temporal-decoupling"


def test_find_pair_ambiguous_prefix():
    with pytest.raises(AmbiguousPrincipleError) as exc_info:
        find_pair("de")

    assert exc_info.value.candidates == [
        "dependency-inversion",
        "design-by-contract",
        "design-for-testability",
    ]


def test_find_pair_unknown_name_suggests_close_matches():
    with pytest.raises(UnknownPrincipleError) as exc_info:
        find_pair("encapsulaton")

    assert "encapsulation" in exc_info.value.suggestions
    assert "did you mean" in str(exc_info.value)


def test_find_pair_unknown_name_without_suggestions():
    with pytest.raises(UnknownPrincipleError) as exc_info:
        find_pair("zzzzzzzz")

    assert exc_info.value.suggestions == []


def test_variants():
    assert VARIANTS == ("correct", "violation")
    assert check_variant("violation") == "violation"
    assert expand_variants("both") == ["correct", "violation"]
    assert expand_variants("correct") == ["correct"]

    with pytest.raises(InvalidVariantError):
        check_variant("both")
    with pytest.raises(InvalidVariantError):
        expand_variants("sideways")


def test_source_path_and_read_source():
    pair = find_pair("kiss")

    path = source_path(pair, "violation")
    assert path.name == "violation.py"
    assert path.parent.name == "kiss"
    assert pair.source_path("correct").name == "correct.py"

    text = read_source(pair, "correct")
    assert "def main" in text
    assert 'if __name__ == "__main__":' in text


def test_filter_by_tag_is_case_insensitive():
    pairs = discover_pairs()
    solid = filter_by_tag(pairs, "SOLID")

    assert [p.slug for p in solid] == [
        "dependency-inversion",
        "interface-segregation",
        "liskov-substitution",
        "open-closed",
        "single-responsibility",
    ]
    assert filter_by_tag(pairs, None) == pairs
    assert filter_by_tag(pairs, "no-such-tag") == []


def test_package_missing_a_variant_is_skipped(tmp_path, monkeypatch, caplog):
    root = tmp_path / "pkgs" / "fake_examples"
    (root / "complete").mkdir(parents=True)
    (root / "half_done").mkdir()
    (root / "__init__.py").write_text("", encoding="utf-8")
    (root / "complete" / "__init__.py").write_text(
        'TITLE = "Complete"\nSUMMARY = "Both modules present."\nALIASES = ("full",)\n',
        encoding="utf-8",
    )
    (root / "complete" / "correct.py").write_text("def main():\n    pass\n", encoding="utf-8")
    (root / "complete" / "violation.py").write_text("def main():\n    pass\n", encoding="utf-8")
    (root / "half_done" / "__init__.py").write_text("", encoding="utf-8")
    (root / "half_done" / "correct.py").write_text("def main():\n    pass\n", encoding="utf-8")

    monkeypatch.syspath_prepend(str(tmp_path / "pkgs"))
    monkeypatch.setattr(registry, "EXAMPLES_PACKAGE", "fake_examples")
    monkeypatch.setattr(registry, "_cache", None)

    with caplog.at_level(logging.WARNING, logger="principles.catalog.registry"):
        pairs = discover_pairs(refresh=True)

    assert [p.slug for p in pairs] == ["complete"]
    assert pairs[0].title == "Complete"
    assert pairs[0].aliases == ("full",)
    assert "fake_examples.half_done" in caplog.text
    assert "violation" in caplog.text
