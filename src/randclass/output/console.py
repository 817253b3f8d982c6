"""Rich Console factory and theme for randclass output.

Consoles render into a StringIO buffer so formatters keep a plain
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) no color codes are emitted unless the caller asks for them.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RANDCLASS_THEME = Theme(
    {
        "rc.name": "bold green",
        "rc.error": "bold red",
        "rc.key": "dim",
        "rc.path": "dim",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Emit ANSI styles even though the buffer is not a terminal.
            Set when the real stdout is a TTY.
        width: Override terminal width. Long paths and messages are never
            wrapped, so this only matters for Rich's own layout.
    """
    return Console(
        file=StringIO(),
        theme=RANDCLASS_THEME,
        force_terminal=color,
        no_color=not color,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
