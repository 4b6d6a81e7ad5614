"""Subcommand modules for resolvctl.

Provides register_commands() which uses deferred imports to keep
``resolvctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from resolvctl.commands.build import build
    from resolvctl.commands.options import options

    cli.add_command(build)
    cli.add_command(options)
