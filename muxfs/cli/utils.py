"""CLI helper utilities for muxfs commands."""

from __future__ import annotations

import json
from typing import Any, Protocol

import typer
import yaml
from rich.console import Console

from muxfs.api.fs import create_multifs
from muxfs.core.logging import configure_logging
from muxfs.drivers.multifs import MultiFS
from muxfs.kernel.config import MuxFSConfig, load_config
from muxfs.kernel.exceptions import ConfigurationError


class ContextProtocol(Protocol):
    """Protocol for common interface between Click and Typer contexts."""

    @property
    def obj(self) -> dict[str, Any] | None: ...


console = Console()


def _settings(ctx: ContextProtocol | None) -> dict[str, Any]:
    obj = getattr(ctx, "obj", None) if ctx is not None else None
    return obj if isinstance(obj, dict) else {}


def output_format(ctx: ContextProtocol | None) -> str:
    """Return the output format selected by the global flags."""
    return _settings(ctx).get("output_format", "pretty")


def print_output(data: Any, ctx: ContextProtocol | None = None) -> None:
    """Print ``data`` according to ``ctx.obj['output_format']``.

    If ctx is None or no format specified, pretty-print using rich.console.
    """
    fmt = output_format(ctx)

    if fmt == "json":
        typer.echo(json.dumps(data, default=str, indent=2))
    elif fmt == "yaml":
        typer.echo(yaml.safe_dump(data, sort_keys=False))
    elif isinstance(data, (str, int, float)):
        typer.echo(str(data))
    else:
        console.print(data)


def parse_mount_option(value: str) -> tuple[str, str]:
    """Split a ``--mount ID=DIR`` value.

    Raises
    ------
    typer.BadParameter
        If the value has no ``=`` or either side is empty.
    """
    mount_id, sep, directory = value.partition("=")
    if not sep or not mount_id or not directory:
        raise typer.BadParameter(f"expected ID=DIR, got {value!r}", param_hint="--mount")
    return mount_id, directory


def load_cli_config(ctx: ContextProtocol | None) -> MuxFSConfig:
    """Load the configuration named by ``--config`` and apply its logging.

    ``--mount`` options are layered on top of the configured mounts, and
    ``--log-level``, ``-q`` or ``-V`` replace the configured log level.
    """
    settings = _settings(ctx)
    try:
        config = load_config(settings.get("config_path"))
    except (ConfigurationError, FileNotFoundError) as e:
        console.print(f"[red]Cannot load configuration: {e}[/red]")
        raise typer.Exit(1) from e

    log = config.logging
    configure_logging(
        level=settings.get("log_level") or log.level,
        format=log.format,
        output_file=log.output_file,
        use_color=log.use_color,
        include_timestamp=log.include_timestamp,
        force_reconfigure=True,
    )

    for value in settings.get("mounts") or []:
        mount_id, directory = parse_mount_option(value)
        config.mounts[mount_id] = directory
    return config


def build_multifs(ctx: ContextProtocol | None) -> MultiFS:
    """Build the MultiFS described by the configuration and ``--mount`` flags."""
    config = load_cli_config(ctx)
    try:
        return create_multifs(config.mounts)
    except ValueError as e:
        console.print(f"[red]Invalid mount: {e}[/red]")
        raise typer.Exit(1) from e
