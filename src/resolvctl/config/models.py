"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, resolvctl.toml only contains
overrides. An empty file (or none at all) yields a usable configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from resolvctl.infrastructure.writer import DEFAULT_HEADER


class DefaultsConfig(BaseModel):
    """[defaults] section: baseline entries applied before CLI values.

    A directive given on the command line replaces its baseline here
    rather than extending it.
    """

    model_config = {"frozen": True}

    nameservers: list[str] = Field(default_factory=list)
    domain: str | None = None
    search: list[str] = Field(default_factory=list)
    sortlist: list[str] = Field(default_factory=list)
    options: list[str] = Field(default_factory=list)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    path: str | None = None
    header: str = DEFAULT_HEADER


class ResolvConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
