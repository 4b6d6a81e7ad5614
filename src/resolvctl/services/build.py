"""BuildService: assemble a configuration from raw CLI/config tokens.

Pipeline for ``build``: NAMESERVERS -> DOMAIN -> SEARCH -> SORTLIST ->
OPTIONS -> RENDER. The first rejected entry stops the pipeline and its
error is returned unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from resolvctl.domain.errors import UnknownOptionError
from resolvctl.domain.items import (
    new_domain,
    new_nameserver,
    new_option,
    new_search_domain,
    new_sort_item,
)
from resolvctl.domain.options import OPTION_VOCABULARY, parse_option
from resolvctl.infrastructure.writer import DEFAULT_HEADER, render_lines, write_conf
from resolvctl.services.base import BaseService
from resolvctl.services.result import (
    INVALID_ADDRESS,
    INVALID_NAME,
    WRITE_FAILED,
    ServiceResult,
)

logger = logging.getLogger(__name__)


def _has_whitespace(name: str) -> bool:
    # one name per token; a blank would split it into several on render
    return any(ch.isspace() for ch in name)


def _invalid_name(op: str, name: str) -> ServiceResult:
    return ServiceResult.failure(op, INVALID_NAME, f"Invalid domain name {name!r}", entry=name)


class BuildService(BaseService):
    """Adds entries to a configuration one token at a time."""

    # ------------------------------------------------------------------
    # Single entries
    # ------------------------------------------------------------------

    def add_nameserver(self, address: str) -> ServiceResult:
        op = "add_nameserver"
        try:
            item = new_nameserver(address)
        except ValueError:
            return ServiceResult.failure(
                op, INVALID_ADDRESS, f"Invalid nameserver address {address!r}", entry=address
            )
        return self._admit(op, item)

    def set_domain(self, name: str) -> ServiceResult:
        op = "set_domain"
        if _has_whitespace(name):
            return _invalid_name(op, name)
        return self._admit(op, new_domain(name))

    def add_search_domain(self, name: str) -> ServiceResult:
        op = "add_search_domain"
        if _has_whitespace(name):
            return _invalid_name(op, name)
        return self._admit(op, new_search_domain(name))

    def add_sort_item(self, token: str) -> ServiceResult:
        """Add a sortlist pair given as ``address`` or ``address/netmask``."""
        op = "add_sort_item"
        address, _, netmask = token.partition("/")
        try:
            item = new_sort_item(address, netmask or None)
        except ValueError:
            return ServiceResult.failure(
                op, INVALID_ADDRESS, f"Invalid sortlist pair {token!r}", entry=token
            )
        return self._admit(op, item)

    def add_option(self, token: str) -> ServiceResult:
        """Add an option given in its canonical form (``rotate``, ``ndots:2``)."""
        op = "add_option"
        try:
            parsed = parse_option(token)
        except UnknownOptionError as exc:
            return ServiceResult.failure(op, exc.code, str(exc), entry=token)

        opt = new_option(parsed.type, parsed.value)
        if opt is None:
            return ServiceResult.failure(
                op, UnknownOptionError.code, f"Unknown option {parsed.type!r}", entry=token
            )
        return self._admit(op, opt)

    # ------------------------------------------------------------------
    # Whole configuration
    # ------------------------------------------------------------------

    def build(
        self,
        *,
        nameservers: list[str] | None = None,
        domain: str | None = None,
        search: list[str] | None = None,
        sortlist: list[str] | None = None,
        options: list[str] | None = None,
        header: str | None = DEFAULT_HEADER,
    ) -> ServiceResult:
        """Apply a full request in directive order and render the result."""
        op = "build"
        steps: list[tuple[Callable[[str], ServiceResult], str]] = [
            *((self.add_nameserver, address) for address in nameservers or []),
            *([(self.set_domain, domain)] if domain is not None else []),
            *((self.add_search_domain, name) for name in search or []),
            *((self.add_sort_item, token) for token in sortlist or []),
            *((self.add_option, token) for token in options or []),
        ]

        for apply, token in steps:
            step = apply(token)
            if not step.ok:
                return ServiceResult(ok=False, op=op, error=step.error)

        warnings: list[str] = []
        if self._conf.domain().name and self._conf.search_domains():
            warnings.append(
                "domain and search are mutually exclusive; "
                "resolvers honour whichever line appears last"
            )

        lines = render_lines(self._conf, header=header)
        logger.debug("Built configuration with %d entries", len(self._conf))
        return ServiceResult(
            ok=True,
            op=op,
            data={"lines": lines},
            warnings=warnings,
            meta={"entries": len(self._conf)},
        )

    def render(self, *, header: str | None = DEFAULT_HEADER) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="render",
            data={"lines": render_lines(self._conf, header=header)},
        )

    def write(self, path: Path, *, header: str | None = DEFAULT_HEADER) -> ServiceResult:
        """Render the configuration and write it to *path*."""
        op = "write"
        lines = render_lines(self._conf, header=header)
        try:
            write_conf(path, lines)
        except OSError as exc:
            return ServiceResult.failure(op, WRITE_FAILED, str(exc), path=str(path))
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(path), "lines_written": len(lines)},
        )


def list_options() -> ServiceResult:
    """Describe the option vocabulary as ``{tag: kind}``."""
    return ServiceResult(
        ok=True,
        op="list_options",
        data={tag: str(kind) for tag, kind in OPTION_VOCABULARY.items()},
    )
