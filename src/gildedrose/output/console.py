"""Rich Console factory and theme for gildedrose output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GILDEDROSE_THEME = Theme(
    {
        "gr.ok": "bold green",
        "gr.error": "bold red",
        "gr.warning": "bold yellow",
        "gr.op": "bold cyan",
        "gr.key": "dim",
        "gr.name": "bold",
        "gr.special": "magenta",
        "gr.up": "green",
        "gr.down": "red",
        "gr.same": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=GILDEDROSE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_change(before: int, after: int) -> str:
    """Return the Rich style name for a value moving from *before* to *after*."""
    if after > before:
        return "gr.up"
    if after < before:
        return "gr.down"
    return "gr.same"
