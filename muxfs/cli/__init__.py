"""muxfs command-line interface."""

from muxfs.cli.main import app, main

__all__ = ["app", "main"]
