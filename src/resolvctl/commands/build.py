"""Command: assemble a resolver configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from resolvctl.commands._base import ResolvCommand

if TYPE_CHECKING:
    from resolvctl.commands._context import AppContext


@click.command(
    cls=ResolvCommand,
    examples="""\
  resolvctl build --nameserver 1.1.1.1 --nameserver 9.9.9.9
  resolvctl build --domain corp.example --option ndots:2 --option rotate
  resolvctl build --search a.example --search b.example --sortlist 10.0.0.0/255.0.0.0
  resolvctl build --no-defaults --nameserver ::1 --output ./resolv.conf
  resolvctl --json build --nameserver 8.8.8.8""",
)
@click.option("--nameserver", "nameservers", multiple=True, help="Nameserver address (max 3).")
@click.option("--domain", default=None, help="Local domain name.")
@click.option("--search", multiple=True, help="Search list entry.")
@click.option(
    "--sortlist",
    multiple=True,
    metavar="ADDR[/MASK]",
    help="Sortlist pair (max 10).",
)
@click.option("--option", "options", multiple=True, help="Resolver option, e.g. ndots:2.")
@click.option("--no-defaults", is_flag=True, help="Ignore [defaults] from resolvctl.toml.")
@click.option("--no-header", is_flag=True, help="Omit the generated-by comment line.")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the file here instead of printing it.",
)
@click.pass_obj
def build(
    app: AppContext,
    nameservers: tuple[str, ...],
    domain: str | None,
    search: tuple[str, ...],
    sortlist: tuple[str, ...],
    options: tuple[str, ...],
    no_defaults: bool,
    no_header: bool,
    output: Path | None,
) -> None:
    """Build a resolv.conf from nameservers, domain, search, sortlist and options.

    Values given on the command line replace the matching [defaults]
    entries from resolvctl.toml.
    """
    from resolvctl.config.models import DefaultsConfig
    from resolvctl.domain.conf import ResolvConf
    from resolvctl.services.build import BuildService

    base = DefaultsConfig() if no_defaults else app.settings.defaults
    header = None if no_header else app.settings.output.header

    svc = BuildService(ResolvConf())
    result = svc.build(
        nameservers=list(nameservers) or base.nameservers,
        domain=domain if domain is not None else base.domain,
        search=list(search) or base.search,
        sortlist=list(sortlist) or base.sortlist,
        options=list(options) or base.options,
        header=header,
    )

    target = output or (Path(app.settings.output.path) if app.settings.output.path else None)
    if target is None or not result.ok:
        app.emit(result)
        return
    written = svc.write(target, header=header)
    app.emit(written.model_copy(update={"warnings": result.warnings}))
