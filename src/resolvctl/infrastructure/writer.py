"""Render a :class:`ResolvConf` to ``resolv.conf`` lines and write them out.

Line layout (empty groups produce no line)::

    # <header>
    nameserver <addr>        (one per nameserver)
    domain <name>
    search <name> <name> ...
    sortlist <pair> <pair> ...
    options <opt> <opt> ...

Within each group, entries keep the configuration's insertion order.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resolvctl.domain.conf import ResolvConf

DEFAULT_HEADER = "Generated by resolvctl"


def _joined(directive: str, values: list[str]) -> list[str]:
    if not values:
        return []
    return [f"{directive} {' '.join(values)}"]


def render_lines(conf: ResolvConf, *, header: str | None = DEFAULT_HEADER) -> list[str]:
    """Render *conf* as a list of lines without trailing newlines."""
    lines: list[str] = []
    if header:
        # every header line stays a comment
        lines.extend(f"# {part}" for part in header.splitlines())

    lines.extend(f"nameserver {ns}" for ns in conf.nameservers())

    domain = conf.domain()
    if domain.name:
        lines.append(f"domain {domain}")

    lines.extend(_joined("search", [str(sd) for sd in conf.search_domains()]))
    lines.extend(_joined("sortlist", [str(si) for si in conf.sort_items()]))
    lines.extend(_joined("options", [str(opt) for opt in conf.options()]))
    return lines


def write_conf(path: Path, lines: list[str]) -> None:
    """Write *lines* to *path* with a trailing newline.

    Creates parent directories if they don't exist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
