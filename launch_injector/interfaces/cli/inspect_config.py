"""The ``dli-inspect`` command for checking a launch config.

Shows what a launch would inject for a given environment without starting
anything::

    dli-inspect /tmp/dli.cfg --env client
"""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from launch_injector.app.config import ENV_VAR
from launch_injector.domain import LaunchConfig
from launch_injector.parsers import ConfigError, decode_escaped, load_config_file

console = Console()


def _render_tables(config: LaunchConfig, environment: str) -> None:
    args_table = Table(title=f"Extra Arguments ({environment})")
    args_table.add_column("#", justify="right")
    args_table.add_column("Argument")
    for index, arg in enumerate(config.args, start=1):
        args_table.add_row(str(index), arg)

    props_table = Table(title=f"Extra Properties ({environment})")
    props_table.add_column("Key")
    props_table.add_column("Value")
    for key, value in config.properties.items():
        props_table.add_row(key, value)

    console.print(args_table)
    console.print(props_table)


@click.command(
    name="inspect", context_settings={"help_option_names": ["-h", "--help"]}
)
@click.argument("config_location")
@click.option(
    "--env",
    "environment",
    envvar=ENV_VAR,
    required=True,
    help=f"Environment whose sections to select (defaults to ${ENV_VAR}).",
)
@click.option("--json-output", is_flag=True, help="Output the result as JSON.")
@click.pass_context
def inspect_config(
    ctx: click.Context, config_location: str, environment: str, json_output: bool
) -> None:
    """Show the arguments and properties CONFIG_LOCATION injects.

    CONFIG_LOCATION may contain ``@@hex`` escapes, as DLI_CONFIG may.
    """

    path = Path(decode_escaped(config_location))
    if not path.is_file():
        console.print(f"[red]Config file not found: {path}[/red]")
        ctx.exit(1)

    try:
        config = load_config_file(path, environment)
    except ConfigError as exc:
        console.print(f"[red]Line {exc.line_number}: {exc}[/red]")
        ctx.exit(1)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Could not read {path}: {exc}[/red]")
        ctx.exit(1)

    if json_output:
        payload = {"args": config.args, "properties": config.properties}
        click.echo(json.dumps(payload, indent=2))
        return

    if not config.args and not config.properties:
        console.print(f"[yellow](Nothing to inject for {environment})[/yellow]")
        return
    _render_tables(config, environment)
