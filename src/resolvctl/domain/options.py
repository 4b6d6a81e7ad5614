"""Option token codec: the recognized ``options`` vocabulary.

:data:`OPTION_VOCABULARY` is the single source of truth for which option
tags exist and whether each is a bare flag (``rotate``) or carries an
integer (``ndots:2``). Both rendering and decoding consult it, so a tag
that renders also decodes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from resolvctl.domain.errors import UnknownOptionError


class OptionKind(StrEnum):
    """Shape of an option's canonical rendering."""

    FLAG = "flag"
    VALUED = "valued"


OPTION_VOCABULARY: dict[str, OptionKind] = {
    "debug": OptionKind.FLAG,
    "rotate": OptionKind.FLAG,
    "no-check-names": OptionKind.FLAG,
    "inet6": OptionKind.FLAG,
    "ip6-bytestring": OptionKind.FLAG,
    "ip6-dotint": OptionKind.FLAG,
    "no-ip6-dotint": OptionKind.FLAG,
    "edns0": OptionKind.FLAG,
    "single-request": OptionKind.FLAG,
    "single-request-reopen": OptionKind.FLAG,
    "no-tld-query": OptionKind.FLAG,
    "use-vc": OptionKind.FLAG,
    "ndots": OptionKind.VALUED,
    "timeout": OptionKind.VALUED,
    "attempts": OptionKind.VALUED,
}

# tag, optionally ":<int>" in ASCII digits. Negative values decode; admission rejects them.
_OPTION_PATTERN = re.compile(r"^([a-z0-9-]+)(?::(-?[0-9]+))?$")


@dataclass(frozen=True)
class ParsedOption:
    """A decoded option token."""

    type: str
    value: int | None = None


def is_known_option(option_type: str) -> bool:
    """Check whether *option_type* is in the vocabulary."""
    return option_type in OPTION_VOCABULARY


def render_option(option_type: str, value: int) -> str:
    """Render an option in its canonical ``options`` form.

    Returns ``""`` for tags outside the vocabulary.

    Examples:
        >>> render_option("rotate", 0)
        'rotate'
        >>> render_option("ndots", 2)
        'ndots:2'
    """
    kind = OPTION_VOCABULARY.get(option_type)
    if kind is OptionKind.FLAG:
        return option_type
    if kind is OptionKind.VALUED:
        return f"{option_type}:{value}"
    return ""


def parse_option(text: str) -> ParsedOption:
    """Decode a canonical option rendering into a :class:`ParsedOption`.

    Flag tags must appear alone; valued tags must carry ``:<integer>``.
    Anything else raises :class:`UnknownOptionError`.
    """
    match = _OPTION_PATTERN.match(text.strip())
    if match is None:
        msg = f"Unrecognized option {text!r}"
        raise UnknownOptionError(msg)

    option_type, raw_value = match.group(1), match.group(2)
    kind = OPTION_VOCABULARY.get(option_type)
    if kind is OptionKind.FLAG and raw_value is None:
        return ParsedOption(type=option_type)
    if kind is OptionKind.VALUED and raw_value is not None:
        return ParsedOption(type=option_type, value=int(raw_value))

    msg = f"Unrecognized option {text!r}"
    raise UnknownOptionError(msg)
