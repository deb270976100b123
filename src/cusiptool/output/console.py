"""Rich Console factory and theme for cusiptool output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CUSIP_THEME = Theme(
    {
        "cusip.ok": "bold green",
        "cusip.error": "bold red",
        "cusip.warning": "bold yellow",
        "cusip.op": "bold cyan",
        "cusip.key": "dim",
        "cusip.id": "bold blue",
        "cusip.valid": "green",
        "cusip.invalid": "red",
        "cusip.digit": "magenta",
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
        theme=CUSIP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
