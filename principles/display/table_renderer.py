"""
Common display utilities for the Principles CLI.

This module provides table rendering and ANSI styling used by the list and
verify commands.
"""

import re
import shutil
import unicodedata
from typing import List, Dict, Optional, Any

from principles.config.settings import get_settings

ANSI_RESET = "\033[0m"
ANSI_BOLD = "\033[1m"
ANSI_DIM = "\033[2m"
ANSI_COLORS = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bright_black": "\033[90m",
    "bright_white": "\033[97m",
}

EMOJI_WIDTH_2 = {
    "✅",
    "❌",
    "⏭",
}

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def _style_text(text: str, color: Optional[str] = None, bold: bool = False, dim: bool = False) -> str:
    """Apply ANSI styling to text."""
    settings = get_settings()
    if not settings.color_output:
        return text
    parts = []
    if bold:
        parts.append(ANSI_BOLD)
    if dim:
        parts.append(ANSI_DIM)
    if color:
        parts.append(ANSI_COLORS.get(color, ""))
    if not parts:
        return text
    return "".join(parts) + text + ANSI_RESET


def _char_display_width(char: str) -> int:
    """Get the display width of a character."""
    if char in EMOJI_WIDTH_2:
        return 2
    if unicodedata.combining(char):
        return 0
    east_asian = unicodedata.east_asian_width(char)
    if east_asian in ("W", "F"):
        return 2
    if unicodedata.category(char) == "So":
        return 2
    return 1


def _display_width(text: str) -> int:
    """Calculate the display width of text, excluding ANSI escape sequences."""
    stripped = ANSI_ESCAPE_RE.sub("", text)
    return sum(_char_display_width(ch) for ch in stripped)


def _pad_to_width(text: str, width: int) -> str:
    """Pad text to a specified width."""
    padding = width - _display_width(text)
    if padding <= 0:
        return text
    return text + (" " * padding)


def _truncate(text: str, width: int, unicode_symbols: bool) -> str:
    """Truncate text to a specified width with ellipsis."""
    if width <= 0:
        return ""
    if _display_width(text) <= width:
        return text
    if width <= 1:
        return text[:width]
    ellipsis = "…" if unicode_symbols else "..."
    ellipsis_width = _display_width(ellipsis)
    if width <= ellipsis_width:
        return text[:width]
    remaining = width - ellipsis_width
    clipped = []
    current = 0
    for ch in text:
        ch_width = _char_display_width(ch)
        if current + ch_width > remaining:
            break
        clipped.append(ch)
        current += ch_width
    return "".join(clipped) + ellipsis


def _status_display(status: str, unicode_symbols: bool) -> tuple[str, str]:
    """Convert a run status to display string and color."""
    normalized = (status or "unknown").lower()
    status_map = {
        "pass": ("Pass", "green", "✅"),
        "fail": ("Fail", "red", "❌"),
        "skip": ("Skip", "yellow", "⏭"),
    }
    label, color, emoji = status_map.get(normalized, ("Unknown", "bright_black", "?"))
    if unicode_symbols:
        return f"{emoji} {label}", color
    return label, color


def _box_chars(unicode_symbols: bool) -> dict[str, str]:
    """Get box drawing characters based on unicode support."""
    if unicode_symbols:
        return {
            "top_left": "╭",
            "top_right": "╮",
            "bottom_left": "╰",
            "bottom_right": "╯",
            "horizontal": "─",
            "vertical": "│",
            "mid_left": "├",
            "mid_right": "┤",
        }
    return {
        "top_left": "+",
        "top_right": "+",
        "bottom_left": "+",
        "bottom_right": "+",
        "horizontal": "-",
        "vertical": "|",
        "mid_left": "+",
        "mid_right": "+",
    }


class TableRenderer:
    """Unified table renderer for consistent display across CLI modules."""

    def __init__(self, title: str, headers: List[str], rows: List[Dict[str, Any]],
                 border_color: Optional[str] = "yellow", footer: Optional[str] = None):
        self.title = title
        self.headers = headers
        self.rows = rows
        self.border_color = border_color
        self.footer = footer

    @staticmethod
    def _key(header: str) -> str:
        return "idx" if header == "#" else header.lower().replace(' ', '_')

    def render(self) -> List[str]:
        """Render the table as a list of strings."""
        settings = get_settings()
        unicode_symbols = settings.unicode_symbols
        term_width = shutil.get_terminal_size(fallback=(100, 20)).columns
        term_width = max(term_width, 20)
        box = _box_chars(unicode_symbols)

        ncol = len(self.headers)
        content_widths = []
        for header in self.headers:
            col_width = max(
                _display_width(header),
                max((_display_width(self._cell_text(header, row, unicode_symbols)) for row in self.rows), default=0),
            )
            content_widths.append(max(col_width, 1 if header == "#" else 4))

        content_width = sum(w + 2 for w in content_widths) + (ncol - 1) * 2
        max_term_width = max(term_width - 2, 10)
        inner_width = min(max_term_width, max(content_width, _display_width(self.title) + 2, 10))

        # Give the widest text column whatever room is left (or take it away)
        if content_width > inner_width:
            widest = max(range(ncol), key=lambda i: content_widths[i])
            overflow = content_width - inner_width
            content_widths[widest] = max(content_widths[widest] - overflow, 6)

        lines = []
        lines.append(_style_text(
            box["top_left"] + (box["horizontal"] * inner_width) + box["top_right"],
            color=self.border_color
        ))

        title_text = _truncate(self.title, inner_width - 2, unicode_symbols)
        title_line = f"{box['vertical']} " + _pad_to_width(title_text, inner_width - 2) + f" {box['vertical']}"
        lines.append(_style_text(title_line, color="bright_white", bold=True))

        header_cells = [" " + _pad_to_width(h, w) + " " for h, w in zip(self.headers, content_widths)]
        header_line = box["vertical"] + _pad_to_width("  ".join(header_cells), inner_width) + box["vertical"]
        lines.append(_style_text(header_line, color="bright_white", bold=True))

        lines.append(_style_text(
            box["mid_left"] + (box["horizontal"] * inner_width) + box["mid_right"],
            color=self.border_color
        ))

        if self.rows:
            for row in self.rows:
                row_cells = []
                for i, header in enumerate(self.headers):
                    cell_text = _truncate(self._cell_text(header, row, unicode_symbols), content_widths[i], unicode_symbols)
                    padded = " " + _pad_to_width(cell_text, content_widths[i]) + " "
                    if header.lower() == "status":
                        _, status_color = _status_display(str(row.get("status", "")), unicode_symbols)
                        padded = _style_text(padded, color=status_color)
                    row_cells.append(padded)
                line = box["vertical"] + _pad_to_width("  ".join(row_cells), inner_width) + box["vertical"]
                lines.append(line)
        else:
            empty_text = _truncate("(none)", inner_width - 2, unicode_symbols)
            empty_line = f"{box['vertical']} " + _pad_to_width(empty_text, inner_width - 2) + f" {box['vertical']}"
            lines.append(_style_text(empty_line, color="bright_black", dim=True))

        lines.append(_style_text(
            box["bottom_left"] + (box["horizontal"] * inner_width) + box["bottom_right"],
            color=self.border_color
        ))

        lines.append(_style_text(f"Total: {len(self.rows)} {self.title.lower()}",
                                 color="bright_black", dim=True))
        if self.footer:
            lines.append(_style_text(self.footer, color="bright_black", dim=True))

        return lines

    def _cell_text(self, header: str, row: Dict[str, Any], unicode_symbols: bool) -> str:
        value = str(row.get(self._key(header), ''))
        if header.lower() == "status":
            return _status_display(value, unicode_symbols)[0]
        return value


def render_pair_table(pairs: List[Dict[str, Any]]) -> List[str]:
    """Render the catalog of example pairs."""
    return TableRenderer(
        title="Principles",
        headers=["#", "Slug", "Title", "Tags"],
        rows=pairs,
        footer="Use 'principles show <slug>' or 'principles run <slug>' for details",
    ).render()


def render_results_table(results: List[Dict[str, Any]]) -> List[str]:
    """Render verify results (one row per variant run)."""
    return TableRenderer(
        title="Runs",
        headers=["Slug", "Variant", "Status", "Time"],
        rows=results,
        border_color="cyan",
    ).render()
