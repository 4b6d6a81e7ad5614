"""ResolvConf: the ordered configuration aggregate.

Insertion order is significant: it is the order entries appear in the
rendered file. Sizes are small and bounded, so lookups are linear scans
over the item list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TypeVar

from resolvctl.domain.errors import ConfError
from resolvctl.domain.items import (
    ConfItem,
    Domain,
    Nameserver,
    Option,
    SearchDomain,
    SortItem,
)

logger = logging.getLogger(__name__)

_ItemT = TypeVar("_ItemT", bound=ConfItem)


class ResolvConf:
    """An in-memory resolver configuration.

    Not thread-safe. Callers sharing an instance must serialise access.

    Usage::

        conf = ResolvConf()
        conf.add(new_nameserver("8.8.8.8"))
        conf.add(new_domain("example.com"))
        [str(ns) for ns in conf.nameservers()]
    """

    def __init__(self) -> None:
        self._items: list[ConfItem] = []

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, item: ConfItem) -> None:
        """Admit *item* according to its variant's rule.

        Raises :class:`ConfError` when the item is rejected; the
        configuration is left unchanged in that case.
        """
        try:
            append = item.check_admission(self)
        except ConfError as exc:
            logger.debug("Rejected %s %r: %s", type(item).__name__, item.render(), exc)
            raise
        if append:
            self._items.append(item)
            logger.debug("Added %s %r", type(item).__name__, item.render())
        else:
            logger.debug("Updated %s in place: %r", type(item).__name__, item.render())

    def replace_at(self, index: int, item: ConfItem) -> None:
        """Overwrite the item at *index*, keeping its position."""
        self._items[index] = item

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, item: ConfItem) -> ConfItem | None:
        """Return the first stored item equal to *item*, or None."""
        for existing in self._items:
            if item.equals(existing):
                return existing
        return None

    def index_of(self, item: ConfItem) -> int:
        """Return the position of the first item equal to *item*, or -1."""
        for i, existing in enumerate(self._items):
            if item.equals(existing):
                return i
        return -1

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def _of_type(self, kind: type[_ItemT]) -> list[_ItemT]:
        return [item for item in self._items if isinstance(item, kind)]

    def nameservers(self) -> list[Nameserver]:
        return self._of_type(Nameserver)

    def domain(self) -> Domain:
        """The current Domain, or an empty ``Domain("")`` when unset."""
        domains = self._of_type(Domain)
        return domains[0] if domains else Domain("")

    def search_domains(self) -> list[SearchDomain]:
        return self._of_type(SearchDomain)

    def sort_items(self) -> list[SortItem]:
        return self._of_type(SortItem)

    def options(self) -> list[Option]:
        return self._of_type(Option)

    @property
    def items(self) -> tuple[ConfItem, ...]:
        """All items in insertion order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ConfItem]:
        return iter(self._items)
