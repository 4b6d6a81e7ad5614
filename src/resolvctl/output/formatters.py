"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich, colors) or machines
(--json). Results carrying ``data["lines"]`` are configuration files and
are printed verbatim, one line per entry, so the output can be
redirected straight into a file.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from resolvctl.output.console import create_console, get_output, style_for_line

if TYPE_CHECKING:
    from rich.console import Console

    from resolvctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags derived from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _print_plain(console: Console, text: str, style: str = "") -> None:
    console.print(Text(text, style=style), soft_wrap=True)


def _format_data(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        line = Text("  ")
        line.append(f"{key}:", style="resolv.key")
        line.append(f" {value}")
        console.print(line, soft_wrap=True)


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags. When omitted, *json_output* alone decides.
        json_output: Shorthand used when *settings* is not given.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)

    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()

    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        if settings.quiet:
            _print_plain(console, message)
        else:
            line = Text("ERROR", style="resolv.error")
            line.append(f": {result.op}: {message}")
            console.print(line, soft_wrap=True)
            if settings.verbose and result.error and result.error.detail:
                _format_data(console, result.error.detail)
        return get_output(console).rstrip("\n")

    lines = result.data.get("lines")
    if isinstance(lines, list):
        for entry in lines:
            _print_plain(console, str(entry), style_for_line(str(entry)))
    elif not settings.quiet:
        line = Text("OK", style="resolv.ok")
        line.append(": ")
        line.append(result.op, style="resolv.op")
        console.print(line, soft_wrap=True)
        if result.data:
            _format_data(console, result.data)

    if settings.verbose and result.meta and not isinstance(lines, list):
        _format_data(console, result.meta)
    return get_output(console).rstrip("\n")
