import os
from pathlib import Path

import pytest

from principles.config.settings import set_settings


@pytest.fixture(autouse=True)
def ensure_valid_cwd():
    try:
        os.getcwd()
    except FileNotFoundError:
        os.chdir(Path(__file__).resolve().parents[1])
    yield


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Point PRINCIPLES_CONFIG at a per-test file and drop the cached settings.

    Keeps tests from reading or writing ~/.principles/config.toml.
    """
    config_path = tmp_path / "principles" / "config.toml"
    monkeypatch.setenv("PRINCIPLES_CONFIG", str(config_path))
    set_settings(None)

    yield config_path

    set_settings(None)


@pytest.fixture
def fake_pair_package(tmp_path, monkeypatch):
    """Write a throwaway example package onto sys.path and return its name.

    correct.main raises, violation.main is a coroutine that prints.
    """
    import sys

    name = "fake_principle_pair"
    package_dir = tmp_path / "pkgs" / name
    package_dir.mkdir(parents=True)
    (package_dir / "__init__.py").write_text('TITLE = "Fake"\n', encoding="utf-8")
    (package_dir / "correct.py").write_text(
        "def main():\n"
        "    print('about to fail')\n"
        "    raise ValueError('boom')\n",
        encoding="utf-8",
    )
    (package_dir / "violation.py").write_text(
        "import asyncio\n"
        "\n"
        "async def main():\n"
        "    await asyncio.sleep(0)\n"
        "    print('awaited main ran')\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path / "pkgs"))

    yield name

    for module in [m for m in sys.modules if m == name or m.startswith(name + ".")]:
        del sys.modules[module]
