"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from client_launcher.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from client_launcher.launch_execution import (
    LaunchExecutionError,
    LaunchRequest,
    execute_launch,
    resolve_launch,
)


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON launcher configuration file",
)
_VERSION_OPTION = click.option(
    "--game-version",
    "version",
    required=False,
    help="Version folder to launch instead of game.version from the configuration",
)
_PLAYER_OPTION = click.option(
    "--player",
    "player_name",
    required=False,
    help="Player name to use instead of player.name from the configuration",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="client-launcher")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log resolution details.")
def cli(verbose: bool) -> None:
    """Resolve and launch client versions from their version descriptors."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML launcher configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML launcher configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@_CONFIG_OPTION
@_VERSION_OPTION
@_PLAYER_OPTION
def resolve(config_path: str, version: str | None, player_name: str | None) -> None:
    """Print the resolved launch command, one argument per line."""
    try:
        resolved = resolve_launch(
            LaunchRequest(config_path=config_path, version=version, player_name=player_name)
        )
    except LaunchExecutionError as exc:
        raise CliError(str(exc)) from exc
    for skipped in resolved.dependencies.skipped:
        click.echo(f"skipped {skipped.coordinate}: {skipped.reason.value}", err=True)
    for token in resolved.command.argv():
        click.echo(token)


@cli.command(name="launch")
@_CONFIG_OPTION
@_VERSION_OPTION
@_PLAYER_OPTION
def launch(config_path: str, version: str | None, player_name: str | None) -> None:
    """Start the configured version and print the process id."""
    try:
        outcome = execute_launch(
            LaunchRequest(config_path=config_path, version=version, player_name=player_name)
        )
    except LaunchExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"launched with PID {outcome.pid}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
