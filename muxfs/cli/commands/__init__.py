"""CLI subcommands."""

from muxfs.cli.commands import config_cmd, fs_cmd, mounts_cmd

__all__ = ["config_cmd", "fs_cmd", "mounts_cmd"]
