import asyncio

from principles.catalog import find_pair
from principles.tui.app import PairItem, PrinciplesApp
from principles.tui.entry import main as tui_entry_main


def _pairs():
    return [find_pair("dry"), find_pair("kiss"), find_pair("yagni")]


def test_app_selects_first_pair_on_mount():
    async def _run():
        app = PrinciplesApp(pairs=_pairs())
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.current is not None
            assert app.current.slug == "dry"
            assert app.variant == "correct"
            assert len(app.query(PairItem)) == 3

    asyncio.run(_run())


def test_app_selects_initial_pair():
    async def _run():
        app = PrinciplesApp(initial="keep-it-simple", pairs=_pairs())
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.current.slug == "kiss"

    asyncio.run(_run())


def test_variant_keys_switch_source():
    async def _run():
        app = PrinciplesApp(pairs=_pairs())
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("v")
            await pilot.pause()
            assert app.variant == "violation"

            await pilot.press("c")
            await pilot.pause()
            assert app.variant == "correct"

    asyncio.run(_run())


def test_moving_the_list_changes_the_pair():
    async def _run():
        app = PrinciplesApp(pairs=_pairs())
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("down")
            await pilot.pause()
            assert app.current.slug == "kiss"
            assert app.last_result is None

    asyncio.run(_run())


def test_run_selected_runs_the_shown_variant():
    async def _run():
        app = PrinciplesApp(initial="kiss", pairs=_pairs())
        async with app.run_test() as pilot:
            await pilot.pause()
            app.action_show_variant("violation")
            result = await app.run_selected()
            await pilot.pause()

            assert result is app.last_result
            assert result.slug == "kiss"
            assert result.variant == "violation"
            assert result.success, result.error

    asyncio.run(_run())


def test_app_without_pairs_does_nothing():
    async def _run():
        app = PrinciplesApp(pairs=[])
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.current is None
            assert await app.run_selected() is None

    asyncio.run(_run())


def test_entry_reports_unknown_initial_name(capsys):
    assert tui_entry_main(initial="definitely-not-a-principle") == 1
    assert "Unknown principle" in capsys.readouterr().out
