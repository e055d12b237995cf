"""Rich Console factory and theme for pkgsort output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PKGSORT_THEME = Theme(
    {
        "pkg.ok": "bold green",
        "pkg.error": "bold red",
        "pkg.warning": "bold yellow",
        "pkg.op": "bold cyan",
        "pkg.key": "dim",
        "pkg.stack.standard": "bold green",
        "pkg.stack.special": "bold yellow",
        "pkg.stack.rejected": "bold red",
    }
)

_STACK_STYLES: dict[str, str] = {
    "STANDARD": "pkg.stack.standard",
    "SPECIAL": "pkg.stack.special",
    "REJECTED": "pkg.stack.rejected",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PKGSORT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_stack(classification: str) -> str:
    """Return the Rich style name for a classification."""
    return _STACK_STYLES.get(classification, "")
