"""Configuration data models for muxfs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration for muxfs.

    Attributes
    ----------
    level : str, default="INFO"
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    format : str, default="structured"
        Output format (console, json, structured, rich)
    output_file : str | None, default=None
        Optional file path to write logs to
    use_color : bool, default=True
        Use ANSI color codes (auto-disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.muxfs.logging]
    level = "DEBUG"
    format = "rich"
    ```

    Environment variable overrides:

    ```bash
    export MUXFS_LOG_LEVEL=DEBUG
    export MUXFS_LOG_FORMAT=json
    export MUXFS_LOG_FILE=/var/log/muxfs/muxfs.log
    ```
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "structured", "rich"] = "structured"
    output_file: str | None = None
    use_color: bool = True
    include_timestamp: bool = True


@dataclass(slots=True)
class MuxFSConfig:
    """Complete muxfs configuration.

    Attributes
    ----------
    mounts : dict[str, str]
        Mount identifier to local directory. Each entry is mounted as a
        read-only :class:`~muxfs.drivers.backends.LocalFS`.
    logging : LoggingConfig
        Logging configuration

    Examples
    --------
    YAML manifest:

    ```yaml
    kind: Config
    spec:
      mounts:
        snap1: /srv/snapshots/2024-01-01
        snap2: ${SNAPSHOT_DIR}/latest
      logging:
        level: DEBUG
    ```

    TOML configuration in pyproject.toml:

    ```toml
    [tool.muxfs.mounts]
    snap1 = "/srv/snapshots/2024-01-01"
    ```
    """

    mounts: dict[str, str] = field(default_factory=dict)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
