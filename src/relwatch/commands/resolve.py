"""Command: show the effective options for one service."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from relwatch.commands._base import RelwatchCommand

if TYPE_CHECKING:
    from relwatch.commands._context import AppContext


@click.command(
    cls=RelwatchCommand,
    examples="""\
  relwatch resolve --interval 10
  relwatch resolve --inactive --no-semver
  relwatch resolve --default-interval 1h --default-semver
  relwatch --json resolve --interval 1m30s""",
)
@click.option("--active/--inactive", default=None, help="Root active flag (unset means active).")
@click.option("--interval", default="", help="Root polling interval, e.g. 10m or 90.")
@click.option("--semver/--no-semver", "semantic_versioning", default=None, help="Root semver flag.")
@click.option("--default-interval", default="", help="Service Defaults interval.")
@click.option(
    "--default-semver/--no-default-semver",
    "default_semantic_versioning",
    default=None,
    help="Service Defaults semver flag.",
)
@click.pass_obj
def resolve(
    app: AppContext,
    active: bool | None,
    interval: str,
    semantic_versioning: bool | None,
    default_interval: str,
    default_semantic_versioning: bool | None,
) -> None:
    """Validate root options and print the values in effect."""
    from relwatch.domain.options import new_defaults, new_options
    from relwatch.services.options import OptionsService

    defaults = None
    if default_interval or default_semantic_versioning is not None:
        defaults = new_defaults(default_interval, default_semantic_versioning)

    svc = OptionsService(defaults=defaults, hard_defaults=app.hard_defaults)
    app.emit(svc.resolve(new_options(active, interval, semantic_versioning)))
