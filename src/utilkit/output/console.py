"""Rich Console factory and theme for utilkit output.

Consoles render into a StringIO buffer so formatters can return plain
strings. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

UTILKIT_THEME = Theme(
    {
        "uk.ok": "bold green",
        "uk.error": "bold red",
        "uk.warning": "bold yellow",
        "uk.op": "bold cyan",
        "uk.key": "dim",
        "uk.id": "bold blue",
        "uk.true": "green",
        "uk.false": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=UTILKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
