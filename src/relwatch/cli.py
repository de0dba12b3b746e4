"""Root CLI group for relwatch with global flags and command registration."""

from __future__ import annotations

import click

from relwatch import __version__
from relwatch.commands import register_commands
from relwatch.commands._context import AppContext
from relwatch.config.settings import RelwatchSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="relwatch")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """relwatch: release monitor option resolution."""
    settings = RelwatchSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
