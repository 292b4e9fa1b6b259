"""Browse the multiplexed namespace: ls, cat, stat and tree."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from muxfs.api.fs import list_path, read_path, stat_path, tree_path
from muxfs.cli.utils import build_multifs, output_format, print_output
from muxfs.kernel.exceptions import MuxFSError

app = typer.Typer(help="Browse the multiplexed namespace")
console = Console()


def _fail(action: str, path: str, error: Exception) -> typer.Exit:
    console.print(f"[red]Cannot {action} {escape(repr(path))}: {escape(str(error))}[/red]")
    return typer.Exit(1)


@app.command("ls")
def list_directory(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="Directory to list ('.' lists mounts)"),
) -> None:
    """List a directory."""
    mux = build_multifs(ctx)
    try:
        entries = list_path(mux, path)
    except (MuxFSError, OSError) as e:
        raise _fail("list", path, e) from e

    if output_format(ctx) != "pretty":
        print_output(entries, ctx)
        return

    if not entries:
        console.print("[yellow]Empty directory[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Mode")
    table.add_column("Modified")
    for entry in entries:
        name = entry["name"] + ("/" if entry["entry_type"] == "directory" else "")
        table.add_row(
            escape(name),
            entry["entry_type"],
            str(entry["size"]),
            entry["mode"],
            entry["mod_time"],
        )
    console.print(table)


@app.command("cat")
def cat_file(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File to print"),
) -> None:
    """Print the content of a file."""
    mux = build_multifs(ctx)
    try:
        data = read_path(mux, path)
    except (MuxFSError, OSError) as e:
        raise _fail("read", path, e) from e
    typer.echo(data, nl=False)


@app.command("stat")
def stat_entry(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="Path to describe"),
) -> None:
    """Show metadata about a file or directory."""
    mux = build_multifs(ctx)
    try:
        info = stat_path(mux, path)
    except (MuxFSError, OSError) as e:
        raise _fail("stat", path, e) from e

    if output_format(ctx) != "pretty":
        print_output(info, ctx)
        return

    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in info.items():
        table.add_row(key, escape(str(value)))
    console.print(table)


@app.command("tree")
def tree(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="Directory to walk"),
) -> None:
    """List everything below a directory."""
    mux = build_multifs(ctx)
    try:
        paths = tree_path(mux, path)
    except (MuxFSError, OSError) as e:
        raise _fail("walk", path, e) from e

    if output_format(ctx) != "pretty":
        print_output(paths, ctx)
        return
    for p in paths:
        typer.echo(p)
