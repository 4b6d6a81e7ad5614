"""Rich Console factory and theme for resolvctl output.

Consoles render into a StringIO buffer so formatters can keep returning
plain strings. In non-TTY environments (tests, pipes) Rich disables
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RESOLV_THEME = Theme(
    {
        "resolv.ok": "bold green",
        "resolv.error": "bold red",
        "resolv.warning": "bold yellow",
        "resolv.op": "bold cyan",
        "resolv.key": "dim",
        "resolv.directive": "bold blue",
        "resolv.comment": "dim",
    }
)

# resolv.conf directive keyword -> style for its leading word
_DIRECTIVES = frozenset({"nameserver", "domain", "search", "sortlist", "options"})


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=RESOLV_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_line(line: str) -> str:
    """Return the Rich style for one rendered resolv.conf line."""
    if line.startswith("#"):
        return "resolv.comment"
    keyword = line.split(" ", 1)[0]
    return "resolv.directive" if keyword in _DIRECTIVES else ""
