"""Configuration item variants and their admission rules.

Each directive a resolver configuration can hold is a :class:`ConfItem`
subclass. The variant set is closed: Nameserver, Domain, SearchDomain,
SortItem, Option. Every variant renders itself, compares itself against
another item, and decides whether it may join a :class:`ResolvConf`.

Admission contract (``check_admission``):
- ``True``: append to the end of the configuration.
- ``False``: handled in place, do not append (Domain only).
- raises :class:`ConfError`: rejected, configuration unchanged.

INVARIANT: Domain is last-write-wins. Every other variant is
first-write-wins and rejects duplicates.
"""

from __future__ import annotations

import ipaddress
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from resolvctl.domain.errors import (
    CapacityExceededError,
    ConfError,
    DuplicateEntryError,
    InvalidValueError,
    UnknownOptionError,
)
from resolvctl.domain.options import is_known_option, parse_option, render_option

if TYPE_CHECKING:
    from resolvctl.domain.conf import ResolvConf

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

MAX_NAMESERVERS = 3
MAX_SORT_ITEMS = 10

# Initial value of an option built without one. Rejected for ndots.
UNSET_VALUE = -1


def _canonical(address: IPAddress) -> IPAddress:
    """Collapse IPv4-mapped IPv6 addresses onto their IPv4 form."""
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


class ConfItem(ABC):
    """Abstract base for a single resolver configuration directive."""

    @abstractmethod
    def render(self) -> str:
        """Canonical text of this item as it appears in the output."""
        ...

    @abstractmethod
    def equals(self, other: ConfItem) -> bool:
        """Variant-specific equality used for duplicate detection."""
        ...

    @abstractmethod
    def check_admission(self, conf: ResolvConf) -> bool:
        """Decide whether this item may be appended to *conf*."""
        ...

    def __str__(self) -> str:
        return self.render()


# ---------------------------------------------------------------------------
# Concrete variants
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class Nameserver(ConfItem):
    """A ``nameserver`` line. At most three per configuration."""

    address: IPAddress

    def render(self) -> str:
        return str(self.address)

    def equals(self, other: ConfItem) -> bool:
        if not isinstance(other, Nameserver):
            return False
        return _canonical(self.address) == _canonical(other.address)

    def check_admission(self, conf: ResolvConf) -> bool:
        if len(conf.nameservers()) >= MAX_NAMESERVERS:
            msg = f"Too many nameservers, {MAX_NAMESERVERS} is maximum"
            raise CapacityExceededError(msg)
        if conf.find(self) is not None:
            msg = f"Nameserver {self} already exists in conf"
            raise DuplicateEntryError(msg)
        return True


@dataclass(eq=False)
class Domain(ConfItem):
    """The single ``domain`` value. A later Domain replaces the earlier one."""

    name: str

    def render(self) -> str:
        return self.name

    def equals(self, other: ConfItem) -> bool:
        return isinstance(other, Domain) and self.name == other.name

    def check_admission(self, conf: ResolvConf) -> bool:
        index = conf.index_of(conf.domain())
        if index != -1:
            conf.replace_at(index, Domain(self.name))
            return False
        return True


@dataclass(eq=False)
class SearchDomain(ConfItem):
    """One entry of the ``search`` list."""

    name: str

    def render(self) -> str:
        return self.name

    def equals(self, other: ConfItem) -> bool:
        return isinstance(other, SearchDomain) and self.name == other.name

    def check_admission(self, conf: ResolvConf) -> bool:
        if conf.find(self) is not None:
            msg = f"Search domain {self.name} already exists in conf"
            raise DuplicateEntryError(msg)
        return True


@dataclass(eq=False)
class SortItem(ConfItem):
    """One ``sortlist`` pair. The netmask is optional and ignored for equality."""

    address: IPAddress
    netmask: IPAddress | None = None

    def render(self) -> str:
        if self.netmask is not None:
            return f"{self.address}/{self.netmask}"
        return str(self.address)

    def equals(self, other: ConfItem) -> bool:
        if not isinstance(other, SortItem):
            return False
        return _canonical(self.address) == _canonical(other.address)

    def check_admission(self, conf: ResolvConf) -> bool:
        if conf.find(self) is not None:
            msg = f"Sortlist pair {self} already exists in conf"
            raise DuplicateEntryError(msg)
        if len(conf.sort_items()) >= MAX_SORT_ITEMS:
            msg = f"Too long sortlist, {MAX_SORT_ITEMS} is maximum"
            raise CapacityExceededError(msg)
        return True

    def set_netmask(self, netmask: str | IPAddress) -> SortItem:
        self.netmask = ipaddress.ip_address(netmask)
        return self

    def get_netmask(self) -> IPAddress | None:
        return self.netmask


@dataclass(eq=False)
class Option(ConfItem):
    """One entry of the ``options`` line.

    ``value`` is only meaningful for valued tags (``ndots``, ``timeout``,
    ``attempts``). Constructing an Option directly skips the vocabulary
    check done by :func:`new_option`; the admission rule repeats it.
    """

    type: str
    value: int = UNSET_VALUE

    def render(self) -> str:
        return render_option(self.type, self.value)

    def equals(self, other: ConfItem) -> bool:
        return isinstance(other, Option) and self.type == other.type

    def check_admission(self, conf: ResolvConf) -> bool:
        if self.type == "ndots" and self.value < 0:
            msg = f"Bad value {self.value} for option ndots"
            raise InvalidValueError(msg)
        try:
            parse_option(self.render())
        except UnknownOptionError as exc:
            msg = f"Unknown option {self.type!r}"
            raise UnknownOptionError(msg) from exc
        if conf.find(self) is not None:
            msg = f"Option {self} is already present"
            raise DuplicateEntryError(msg)
        return True

    def set(self, value: int) -> Option:
        """Update the value. Negative values are ignored."""
        if value < 0:
            return self
        self.value = value
        return self

    def get(self) -> int:
        return self.value


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def new_nameserver(address: str | IPAddress) -> Nameserver:
    """Create a Nameserver. Raises ``ValueError`` for a malformed address."""
    return Nameserver(ipaddress.ip_address(address))


def new_domain(name: str) -> Domain:
    """Create the value for the ``domain`` directive."""
    return Domain(name)


def new_search_domain(name: str) -> SearchDomain:
    """Create an entry for the ``search`` list."""
    return SearchDomain(name)


def new_sort_item(
    address: str | IPAddress,
    netmask: str | IPAddress | None = None,
) -> SortItem:
    """Create a sortlist pair.

    Renders as ``address/netmask`` when *netmask* is given, otherwise as
    ``address`` alone. Raises ``ValueError`` for a malformed address.
    """
    item = SortItem(ipaddress.ip_address(address))
    if netmask is not None:
        item.set_netmask(netmask)
    return item


def new_option(option_type: str, value: int | None = None) -> Option | None:
    """Create an Option, or return None if *option_type* is not recognized.

    Without *value* the option starts at :data:`UNSET_VALUE`; flag options
    ignore it, valued options need :meth:`Option.set` before admission.
    """
    if not is_known_option(option_type):
        return None
    opt = Option(option_type, UNSET_VALUE if value is None else value)
    try:
        parse_option(opt.render())
    except ConfError:
        return None
    return opt
