"""Command: list recognized resolver options."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from resolvctl.commands._base import ResolvCommand

if TYPE_CHECKING:
    from resolvctl.commands._context import AppContext


@click.command(
    cls=ResolvCommand,
    examples="""\
  resolvctl options
  resolvctl --json options""",
)
@click.pass_obj
def options(app: AppContext) -> None:
    """List recognized option tags and whether each takes a value."""
    from resolvctl.services.build import list_options

    app.emit(list_options())
