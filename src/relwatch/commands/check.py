"""Command: validate the intervals of many services at once."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from relwatch.commands._base import RelwatchCommand

if TYPE_CHECKING:
    from relwatch.commands._context import AppContext


def _parse_assignment(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for raw in values:
        service_id, sep, interval = raw.partition("=")
        if not sep or not service_id:
            msg = f"expected SERVICE=INTERVAL, got {raw!r}"
            raise click.BadParameter(msg, ctx=ctx, param=param)
        pairs[service_id] = interval
    return pairs


@click.command(
    cls=RelwatchCommand,
    examples="""\
  relwatch check alpha=10m beta=90
  relwatch --json check alpha=1h30m beta=10x""",
)
@click.argument("services", nargs=-1, required=True, callback=_parse_assignment)
@click.pass_obj
def check(app: AppContext, services: dict[str, str]) -> None:
    """Check SERVICE=INTERVAL pairs, reporting every invalid interval."""
    from relwatch.domain.options import new_options
    from relwatch.services.options import OptionsService

    svc = OptionsService(hard_defaults=app.hard_defaults)
    options = {
        service_id: svc.attach(new_options(interval=value)) for service_id, value in services.items()
    }
    app.emit(svc.check(options))
