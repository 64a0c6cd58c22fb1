"""
Every example module must run to completion and print something.
"""

import ast

import pytest

from principles.catalog import VARIANTS, discover_pairs, read_source, run_variant

PAIRS = discover_pairs()
CASES = [(pair, variant) for pair in PAIRS for variant in VARIANTS]


def _case_id(case):
    pair, variant = case
    return f"{pair.slug}-{variant}"


@pytest.mark.parametrize("case", CASES, ids=[_case_id(c) for c in CASES])
def test_example_runs(case):
    pair, variant = case

    result = run_variant(pair, variant)

    assert result.success, f"{pair.slug} [{variant}]: {result.error}\n{result.output}"
    assert result.output.strip()


@pytest.mark.parametrize("case", CASES, ids=[_case_id(c) for c in CASES])
def test_example_module_layout(case):
    pair, variant = case
    source = read_source(pair, variant)
    tree = ast.parse(source)

    docstring = ast.get_docstring(tree)
    assert docstring, "module docstring missing"
    expected = "correct implementation" if variant == "correct" else "violation"
    assert docstring.splitlines()[0].endswith(f" - {expected}")

    names = {
        node.name
        for node in tree.body
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))
    }
    assert "main" in names
    assert 'if __name__ == "__main__":' in source
