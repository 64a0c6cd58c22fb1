"""
Principles TUI Application
"""
import asyncio
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Footer, Header, Label, ListItem, ListView, Static

from principles.catalog import VARIANTS, discover_pairs, find_pair, read_source, run_variant
from principles.modules.dataclasses import ExamplePair, RunResult


class PairItem(ListItem):
    """List entry carrying the pair it represents."""

    def __init__(self, pair: ExamplePair) -> None:
        super().__init__(Label(pair.slug))
        self.pair = pair


class PrinciplesApp(App):
    """Browse example pairs, read their source and run them."""

    TITLE = "Principles"

    CSS = """
    #pair-list {
        width: 38;
        border-right: solid $primary;
    }

    #detail {
        width: 1fr;
        padding: 0 1;
    }

    #pair-title {
        text-style: bold;
        color: $accent;
    }

    #pair-summary {
        color: $text-muted;
        margin-bottom: 1;
    }

    #view-label {
        text-style: bold reverse;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("c", "show_variant('correct')", "Correct"),
        Binding("v", "show_variant('violation')", "Violation"),
        Binding("r", "run_selected", "Run"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, initial: Optional[str] = None, pairs: Optional[List[ExamplePair]] = None):
        super().__init__()
        self.pairs = pairs if pairs is not None else discover_pairs()
        self.initial = initial
        self.variant = VARIANTS[0]
        self.current: Optional[ExamplePair] = None
        self.last_result: Optional[RunResult] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield ListView(*[PairItem(pair) for pair in self.pairs], id="pair-list")
            with Vertical(id="detail"):
                yield Label("", id="pair-title")
                yield Static("", id="pair-summary", markup=False)
                yield Label("", id="view-label", markup=False)
                with VerticalScroll(id="body-scroll"):
                    yield Static("", id="body", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        if not self.pairs:
            return
        index = 0
        if self.initial:
            wanted = find_pair(self.initial)
            index = next((i for i, p in enumerate(self.pairs) if p.slug == wanted.slug), 0)
        list_view = self.query_one("#pair-list", ListView)
        list_view.index = index
        self.select_pair(self.pairs[index])
        list_view.focus()

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        if isinstance(event.item, PairItem):
            self.select_pair(event.item.pair)

    def select_pair(self, pair: ExamplePair) -> None:
        self.current = pair
        self.last_result = None
        self.query_one("#pair-title", Label).update(pair.title)
        self.query_one("#pair-summary", Static).update(pair.summary)
        self.show_source()

    def show_source(self) -> None:
        if self.current is None:
            return
        self.query_one("#view-label", Label).update(f"{self.variant} source")
        self.query_one("#body", Static).update(read_source(self.current, self.variant))
        self.query_one("#body-scroll", VerticalScroll).scroll_home(animate=False)

    def action_show_variant(self, variant: str) -> None:
        self.variant = variant
        self.show_source()

    async def action_run_selected(self) -> None:
        await self.run_selected()

    async def run_selected(self) -> Optional[RunResult]:
        """Run the shown variant off the event loop and display its output."""
        if self.current is None:
            return None
        self.query_one("#view-label", Label).update(f"running {self.variant}...")
        result = await asyncio.to_thread(run_variant, self.current, self.variant)
        self.last_result = result

        status = "ok" if result.success else f"FAILED: {result.error}"
        self.query_one("#view-label", Label).update(
            f"{self.variant} output ({status}, {result.duration:.3f}s)"
        )
        self.query_one("#body", Static).update(result.output or "(no output)")
        return result


def main(initial: Optional[str] = None) -> None:
    """Run the TUI. An unknown initial name raises before the screen opens."""
    if initial:
        initial = find_pair(initial).slug
    PrinciplesApp(initial=initial).run()
