"""Shared pytest fixtures and test helpers for resolvctl tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from resolvctl.config.discovery import CONFIG_ENV_VAR
from resolvctl.domain.conf import ResolvConf


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def conf() -> ResolvConf:
    """An empty configuration."""
    return ResolvConf()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config env override.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so a
    resolvctl.toml in a parent directory never leaks into a test.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing a resolvctl.toml into *tmp_path*."""

    def _write(body: str) -> Path:
        path = tmp_path / "resolvctl.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
