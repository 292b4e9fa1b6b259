"""Configuration management commands."""

from dataclasses import asdict

import typer

from muxfs.cli.utils import load_cli_config, print_output

app = typer.Typer(help="Configuration management commands")


@app.command("show")
def show_config(ctx: typer.Context, key: str | None = typer.Argument(None)) -> None:
    """Show the effective configuration or one top-level key."""
    config = asdict(load_cli_config(ctx))
    if key:
        print_output(config.get(key, "<not set>"), ctx)
    else:
        print_output(config, ctx)
