"""muxfs CLI - Main entrypoint."""

import typer
from rich.console import Console

from muxfs import __version__
from muxfs.cli.commands import config_cmd, fs_cmd, mounts_cmd

# Create the main Typer app
app = typer.Typer(
    name="muxfs",
    help="muxfs - browse many read-only filesystems through one namespace.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

console = Console()

app.add_typer(fs_cmd.app, name="fs", help="Browse the multiplexed namespace")
app.add_typer(mounts_cmd.app, name="mounts", help="Inspect mounted filesystems")
app.add_typer(config_cmd.app, name="config", help="Configuration management")

_LOG_LEVELS = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
}


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    *,
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to a kind: Config YAML or TOML file"
    ),
    mount: list[str] | None = typer.Option(
        None, "--mount", "-m", help="Mount a local directory as ID=DIR (repeatable)"
    ),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress non-error output"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable verbose logging"),
    json_out: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
    yaml_out: bool = typer.Option(False, "--yaml", help="Output machine-readable YAML"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level: debug|info|warn|error (overrides config)"
    ),
    version: bool = typer.Option(False, "--version", "-v", help="Show version and exit"),
) -> None:
    """muxfs CLI - read-only filesystem multiplexer.

    Global flags are parsed here and stored on `ctx.obj` for subcommands.
    """
    if version:
        console.print(f"[bold blue]muxfs[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    if ctx.obj is None:
        ctx.obj = {}

    output_format = "pretty"
    if json_out:
        output_format = "json"
    elif yaml_out:
        output_format = "yaml"

    effective_level = log_level.lower() if log_level else None
    if quiet:
        effective_level = "error"
    elif verbose:
        effective_level = "debug"
    if effective_level is not None and effective_level not in _LOG_LEVELS:
        raise typer.BadParameter(f"unknown log level {log_level!r}", param_hint="--log-level")

    ctx.obj.update({
        "config_path": config,
        "mounts": list(mount or []),
        "output_format": output_format,
        # None leaves the configured level in effect
        "log_level": _LOG_LEVELS[effective_level] if effective_level else None,
    })


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
