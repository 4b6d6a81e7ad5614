"""Root CLI group for resolvctl with global flags and command registration.

Settings are resolved once here, in the order CLI flags > RESOLVCTL_*
environment > resolvctl.toml > built-in defaults, and handed to every
subcommand through :class:`AppContext`.
"""

from __future__ import annotations

import logging

import click

from resolvctl import __version__
from resolvctl.commands import register_commands
from resolvctl.commands._context import AppContext
from resolvctl.config.settings import ResolvSettings

logger = logging.getLogger(__name__)


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="resolvctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only rendered lines and errors.")
@click.option("-v", "--verbose", is_flag=True, help="Show error detail and entry counts.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Read defaults from this resolvctl.toml instead of searching for one.",
)
@click.option(
    "--no-config",
    is_flag=True,
    help="Ignore any resolvctl.toml; use built-in defaults and RESOLVCTL_* variables.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    no_config: bool,
) -> None:
    """resolvctl: build resolver configuration files.

    Pass directives to ``build`` to render a resolv.conf, or list the
    supported ``options`` keywords.
    """
    if no_config and config_path:
        raise click.UsageError("--config and --no-config are mutually exclusive.")

    settings = ResolvSettings.from_cli(
        config_path=config_path,
        use_config=not no_config,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    logger.debug("Loaded settings from %s", settings.config_path or "built-in defaults")
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
