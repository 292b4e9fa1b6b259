"""Mount commands for muxfs CLI."""

import typer
from rich.console import Console
from rich.markup import escape

from muxfs.cli.utils import build_multifs, output_format, print_output

app = typer.Typer(help="Inspect mounted filesystems")
console = Console()


@app.command("list")
def list_mounts(ctx: typer.Context) -> None:
    """List mounted filesystems."""
    mux = build_multifs(ctx)
    mounts = mux.mounts()

    if output_format(ctx) != "pretty":
        print_output([{"id": k, "backend": repr(mounts[k])} for k in sorted(mounts)], ctx)
        return

    if not mounts:
        console.print("[yellow]No filesystems mounted[/yellow]")
        raise typer.Exit()
    for mount_id in sorted(mounts):
        console.print(f"• [bold]{escape(mount_id)}[/bold] → {escape(repr(mounts[mount_id]))}")
