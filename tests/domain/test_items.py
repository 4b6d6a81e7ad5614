"""Tests for configuration item variants, factories, and renderings."""

from __future__ import annotations

import ipaddress

import pytest

from resolvctl.domain.items import (
    UNSET_VALUE,
    Domain,
    Nameserver,
    Option,
    SearchDomain,
    SortItem,
    new_domain,
    new_nameserver,
    new_option,
    new_search_domain,
    new_sort_item,
)


class TestNameserver:
    def test_factory_parses_string(self) -> None:
        ns = new_nameserver("8.8.8.8")
        assert ns.address == ipaddress.ip_address("8.8.8.8")

    def test_factory_accepts_ipv6(self) -> None:
        assert new_nameserver("2001:4860:4860::8888").render() == "2001:4860:4860::8888"

    def test_factory_rejects_malformed(self) -> None:
        with pytest.raises(ValueError):
            new_nameserver("not-an-ip")

    def test_render_and_str(self) -> None:
        ns = new_nameserver("1.1.1.1")
        assert ns.render() == "1.1.1.1"
        assert str(ns) == "1.1.1.1"

    def test_equals_same_address(self) -> None:
        assert new_nameserver("1.1.1.1").equals(new_nameserver("1.1.1.1"))

    def test_not_equal_other_address(self) -> None:
        assert not new_nameserver("1.1.1.1").equals(new_nameserver("1.0.0.1"))

    def test_not_equal_other_variant(self) -> None:
        addr = ipaddress.ip_address("10.0.0.1")
        assert not Nameserver(addr).equals(SortItem(addr))


class TestDomainAndSearch:
    def test_domain_render(self) -> None:
        assert new_domain("example.com").render() == "example.com"

    def test_domain_equality_by_name(self) -> None:
        assert new_domain("a.com").equals(Domain("a.com"))
        assert not new_domain("a.com").equals(Domain("b.com"))

    def test_domain_not_equal_search_domain(self) -> None:
        assert not new_domain("a.com").equals(SearchDomain("a.com"))

    def test_search_domain_render(self) -> None:
        assert new_search_domain("corp.example").render() == "corp.example"

    def test_search_domain_equality(self) -> None:
        assert new_search_domain("x").equals(SearchDomain("x"))
        assert not new_search_domain("x").equals(SearchDomain("y"))


class TestSortItem:
    def test_render_without_netmask(self) -> None:
        assert new_sort_item("130.155.160.0").render() == "130.155.160.0"

    def test_render_with_netmask(self) -> None:
        item = new_sort_item("130.155.160.0", "255.255.240.0")
        assert item.render() == "130.155.160.0/255.255.240.0"

    def test_set_netmask_chains(self) -> None:
        item = new_sort_item("10.0.0.0")
        assert item.set_netmask("255.0.0.0") is item
        assert item.get_netmask() == ipaddress.ip_address("255.0.0.0")
        assert item.render() == "10.0.0.0/255.0.0.0"

    def test_get_netmask_default_none(self) -> None:
        assert new_sort_item("10.0.0.0").get_netmask() is None

    def test_equality_ignores_netmask(self) -> None:
        a = new_sort_item("10.0.0.0", "255.0.0.0")
        b = new_sort_item("10.0.0.0", "255.255.0.0")
        assert a.equals(b)

    def test_rejects_malformed_netmask(self) -> None:
        with pytest.raises(ValueError):
            new_sort_item("10.0.0.0", "garbage")


class TestOption:
    def test_factory_flag(self) -> None:
        opt = new_option("rotate")
        assert opt is not None
        assert opt.render() == "rotate"

    def test_factory_valued(self) -> None:
        opt = new_option("ndots", 3)
        assert opt is not None
        assert opt.render() == "ndots:3"

    def test_factory_default_value_is_unset(self) -> None:
        opt = new_option("timeout")
        assert opt is not None
        assert opt.get() == UNSET_VALUE

    def test_factory_unknown_returns_none(self) -> None:
        assert new_option("bogus-type") is None

    @pytest.mark.parametrize("tag", ["", "NDOTS", "ndots:2"])
    def test_factory_rejects_tags_outside_vocabulary(self, tag: str) -> None:
        assert new_option(tag, 2) is None

    def test_set_updates_value(self) -> None:
        opt = new_option("ndots")
        assert opt is not None
        assert opt.set(5) is opt
        assert opt.get() == 5
        assert opt.render() == "ndots:5"

    def test_set_ignores_negative(self) -> None:
        opt = new_option("ndots", 2)
        assert opt is not None
        assert opt.set(-1) is opt
        assert opt.get() == 2

    def test_equality_by_type(self) -> None:
        assert Option("ndots", 1).equals(Option("ndots", 9))
        assert not Option("ndots", 1).equals(Option("timeout", 1))

    def test_direct_construction_of_unknown_renders_empty(self) -> None:
        assert Option("bogus-type", 1).render() == ""


class TestMappedAddresses:
    def test_nameserver_ipv4_mapped_equals_ipv4(self) -> None:
        assert new_nameserver("::ffff:1.1.1.1").equals(new_nameserver("1.1.1.1"))

    def test_sort_item_ipv4_mapped_equals_ipv4(self) -> None:
        assert new_sort_item("::ffff:10.0.0.0").equals(new_sort_item("10.0.0.0"))
