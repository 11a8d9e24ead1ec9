"""The ``dev-launch-injector`` command.

The command takes no options of its own. Every argument, including ``--`` and
anything that looks like ``--help``, belongs to the delegated program and is
passed through untouched. The launcher is driven by environment variables
instead::

    DLI_ENV=client DLI_MAIN=mygame.client:main DLI_CONFIG=/tmp/dli.cfg \\
        dev-launch-injector --username Dev

Click only handles the launcher's own phase. The ``launch`` command prepares
the launch and returns a :class:`~launch_injector.services.Handoff`;
:func:`main` runs it after click has returned, so whatever the target raises
(``EOFError``, ``KeyboardInterrupt``, broken pipes) is not rewritten by
click's exception handling.
"""

from __future__ import annotations

from typing import Sequence

import click

from launch_injector.app.config import load_settings
from launch_injector.infrastructure.host import OsEnvironment
from launch_injector.infrastructure.observability import configure_logging
from launch_injector.services import (
    EntryResolutionError,
    Handoff,
    LaunchOrchestrator,
    MissingEntryPoint,
)

PROG_NAME = "dev-launch-injector"
EXIT_MISSING_ENTRY_POINT = 1
EXIT_UNRESOLVED_ENTRY_POINT = 1


class PassThroughCommand(click.Command):
    """Click command that keeps its raw arguments in ``ctx.args`` unparsed."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args


@click.command(cls=PassThroughCommand, add_help_option=False)
@click.pass_context
def launch(ctx: click.Context) -> Handoff:
    """Inject config-driven arguments and settings for DLI_MAIN."""

    host = OsEnvironment()
    settings = load_settings(host)
    configure_logging(settings.log_level)

    orchestrator = LaunchOrchestrator(host, warn=click.echo)
    try:
        return orchestrator.prepare(ctx.args)
    except MissingEntryPoint as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(EXIT_MISSING_ENTRY_POINT) from exc
    except EntryResolutionError as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(EXIT_UNRESOLVED_ENTRY_POINT) from exc


def main(argv: Sequence[str] | None = None) -> None:
    """Console script entry point.

    Exits with the entry point's result, following ``sys.exit(main())``.
    """

    handoff = launch.main(
        args=list(argv) if argv is not None else None,
        prog_name=PROG_NAME,
        standalone_mode=False,
    )
    raise SystemExit(handoff.run())
