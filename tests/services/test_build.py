"""Tests for BuildService."""

from __future__ import annotations

from pathlib import Path

import pytest

from resolvctl.domain.conf import ResolvConf
from resolvctl.services.build import BuildService, list_options


@pytest.fixture
def svc(conf: ResolvConf) -> BuildService:
    return BuildService(conf)


class TestSingleEntries:
    def test_add_nameserver(self, svc: BuildService) -> None:
        result = svc.add_nameserver("1.1.1.1")
        assert result.ok
        assert result.op == "add_nameserver"
        assert result.data["entry"] == "1.1.1.1"
        assert len(svc.conf.nameservers()) == 1

    def test_add_nameserver_invalid_address(self, svc: BuildService) -> None:
        result = svc.add_nameserver("999.1.1.1")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ADDRESS"
        assert len(svc.conf) == 0

    def test_capacity_reported(self, svc: BuildService) -> None:
        for addr in ("1.1.1.1", "1.0.0.1", "8.8.8.8"):
            assert svc.add_nameserver(addr).ok
        result = svc.add_nameserver("8.8.4.4")
        assert result.error is not None
        assert result.error.code == "CAPACITY_EXCEEDED"
        assert result.error.detail == {"entry": "8.8.4.4"}

    def test_set_domain_replaces(self, svc: BuildService) -> None:
        assert svc.set_domain("a.com").ok
        assert svc.set_domain("b.com").ok
        assert svc.conf.domain().name == "b.com"

    def test_duplicate_search_domain(self, svc: BuildService) -> None:
        assert svc.add_search_domain("a.example").ok
        result = svc.add_search_domain("a.example")
        assert result.error is not None
        assert result.error.code == "DUPLICATE_ENTRY"

    @pytest.mark.parametrize("name", ["a.example b.example", "corp\texample", "a.example\n"])
    def test_name_with_whitespace_rejected(self, svc: BuildService, name: str) -> None:
        for result in (svc.set_domain(name), svc.add_search_domain(name)):
            assert result.error is not None
            assert result.error.code == "INVALID_NAME"
            assert result.error.detail == {"entry": name}
        assert len(svc.conf) == 0

    def test_search_list_keeps_one_name_per_entry(self, svc: BuildService) -> None:
        assert not svc.add_search_domain("a.example b.example").ok
        assert svc.add_search_domain("a.example").ok
        assert [sd.render() for sd in svc.conf.search_domains()] == ["a.example"]

    def test_sort_item_with_netmask(self, svc: BuildService) -> None:
        result = svc.add_sort_item("10.0.0.0/255.0.0.0")
        assert result.ok
        assert result.data["entry"] == "10.0.0.0/255.0.0.0"

    def test_sort_item_without_netmask(self, svc: BuildService) -> None:
        assert svc.add_sort_item("10.0.0.0").data["entry"] == "10.0.0.0"

    def test_sort_item_invalid(self, svc: BuildService) -> None:
        result = svc.add_sort_item("10.0.0.0/abc")
        assert result.error is not None
        assert result.error.code == "INVALID_ADDRESS"

    @pytest.mark.parametrize(
        ("token", "code"),
        [
            ("bogus-type", "UNKNOWN_OPTION"),
            ("ndots", "UNKNOWN_OPTION"),
            ("ndots:-1", "INVALID_VALUE"),
        ],
    )
    def test_option_errors(self, svc: BuildService, token: str, code: str) -> None:
        result = svc.add_option(token)
        assert result.error is not None
        assert result.error.code == code

    def test_option_ok(self, svc: BuildService) -> None:
        assert svc.add_option("ndots:2").ok
        assert svc.add_option("edns0").ok
        assert [o.render() for o in svc.conf.options()] == ["ndots:2", "edns0"]


class TestBuild:
    def test_full_request(self, svc: BuildService) -> None:
        result = svc.build(
            nameservers=["1.1.1.1"],
            domain="corp.example",
            sortlist=["10.0.0.0/255.0.0.0"],
            options=["rotate", "timeout:2"],
            header=None,
        )
        assert result.ok
        assert result.data["lines"] == [
            "nameserver 1.1.1.1",
            "domain corp.example",
            "sortlist 10.0.0.0/255.0.0.0",
            "options rotate timeout:2",
        ]
        assert result.meta == {"entries": 5}
        assert result.warnings == []

    def test_stops_at_first_failure(self, svc: BuildService) -> None:
        result = svc.build(nameservers=["1.1.1.1", "1.1.1.1"], search=["a.example"])
        assert not result.ok
        assert result.op == "build"
        assert result.error is not None
        assert result.error.code == "DUPLICATE_ENTRY"
        assert svc.conf.search_domains() == []

    def test_domain_and_search_warns(self, svc: BuildService) -> None:
        result = svc.build(domain="a.example", search=["b.example"])
        assert result.ok
        assert len(result.warnings) == 1

    def test_empty_request(self, svc: BuildService) -> None:
        result = svc.build(header=None)
        assert result.ok
        assert result.data["lines"] == []


class TestRenderAndWrite:
    def test_render(self, svc: BuildService) -> None:
        svc.add_nameserver("1.1.1.1")
        assert svc.render(header="x").data["lines"] == ["# x", "nameserver 1.1.1.1"]

    def test_write(self, svc: BuildService, tmp_path: Path) -> None:
        svc.add_nameserver("1.1.1.1")
        target = tmp_path / "resolv.conf"
        result = svc.write(target, header=None)
        assert result.ok
        assert result.data == {"path": str(target), "lines_written": 1}
        assert target.read_text(encoding="utf-8") == "nameserver 1.1.1.1\n"

    def test_write_failure(self, svc: BuildService, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x")
        result = svc.write(blocker / "resolv.conf")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "WRITE_FAILED"


class TestListOptions:
    def test_lists_vocabulary(self) -> None:
        result = list_options()
        assert result.ok
        assert result.data["rotate"] == "flag"
        assert result.data["ndots"] == "valued"
        assert len(result.data) == 15
