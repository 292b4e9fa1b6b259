"""Configuration loader for muxfs.

Supports two config sources:

1. **kind: Config YAML**: loaded via explicit path or the
   ``MUXFS_CONFIG_PATH`` env var.
2. **TOML**: ``pyproject.toml [tool.muxfs]`` (auto-discovery fallback) or
   an explicit flat TOML file.
"""

from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any, Literal, cast

import yaml

from muxfs.core.logging import get_logger
from muxfs.kernel.config.models import LoggingConfig, MuxFSConfig
from muxfs.kernel.exceptions import ConfigurationError

# Constants for boolean environment variable parsing
_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse boolean from environment variable value.

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = sorted(_TRUTHY_VALUES | _FALSY_VALUES)
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


class ConfigLoader:
    """Loads and processes muxfs configuration files."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    def load_config_file(self, path: str | Path | None = None) -> MuxFSConfig:
        """Load configuration from YAML or TOML.

        Parameters
        ----------
        path : str | Path | None
            Path to config file. If None, searches using discovery order.

        Raises
        ------
        FileNotFoundError
            If no configuration file is found.
        ConfigurationError
            If the file content is not a valid configuration.
        """
        config_path = self._find_config_file(path)
        logger.debug("Loading configuration from {path}", path=config_path)

        if config_path.suffix in (".yaml", ".yml"):
            return self._load_yaml_config(config_path)
        return self._load_toml_config(config_path)

    def _load_yaml_config(self, config_path: Path) -> MuxFSConfig:
        """Load and parse a ``kind: Config`` YAML file."""
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ConfigurationError(
                config_path.name, f"expected a mapping, got {type(data).__name__}"
            )

        kind = data.get("kind")
        if kind != "Config":
            raise ConfigurationError(
                config_path.name, f"YAML config must use 'kind: Config', got 'kind: {kind}'"
            )

        spec = data.get("spec") or {}
        if not isinstance(spec, dict):
            raise ConfigurationError(config_path.name, "'spec' must be a mapping")

        return self._parse_config(self._substitute_env_vars(spec))

    def _load_toml_config(self, config_path: Path) -> MuxFSConfig:
        """Load and parse a TOML config file (pyproject.toml or flat)."""
        with config_path.open("rb") as f:
            data = tomllib.load(f)

        if "tool" in data and "muxfs" in data.get("tool", {}):
            muxfs_data = data["tool"]["muxfs"]
        elif config_path.name == "pyproject.toml":
            logger.warning("No [tool.muxfs] section found in pyproject.toml, using defaults")
            return get_default_config()
        else:
            muxfs_data = data

        return self._parse_config(self._substitute_env_vars(muxfs_data))

    def _find_config_file(self, path: str | Path | None) -> Path:
        """Find configuration file.

        Discovery order:
        1. Explicit path argument
        2. ``MUXFS_CONFIG_PATH`` env var
        3. ``pyproject.toml`` with a ``[tool.muxfs]`` table in CWD or a parent
        """
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return config_path

        if env_path := os.getenv("MUXFS_CONFIG_PATH"):
            config_path = Path(env_path)
            if config_path.exists():
                logger.debug("Using config from MUXFS_CONFIG_PATH: {}", config_path)
                return config_path
            logger.warning("MUXFS_CONFIG_PATH set but file not found: {}", config_path)

        current = Path.cwd()
        for directory in (current, *current.parents):
            pyproject = directory / "pyproject.toml"
            if not pyproject.exists():
                continue
            with pyproject.open("rb") as f:
                data = tomllib.load(f)
            if "muxfs" in data.get("tool", {}):
                return pyproject

        raise FileNotFoundError(
            "No configuration file found. Provide a kind: Config YAML path, "
            "set MUXFS_CONFIG_PATH, or add [tool.muxfs] to pyproject.toml"
        )

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively replace ``${VAR}`` with environment variable values.

        Unknown variables keep their placeholder.
        """
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                var_name = match.group(1)
                value = os.environ.get(var_name)
                if value is None:
                    logger.debug("Environment variable {} not found, keeping placeholder", var_name)
                    return match.group(0)
                return value

            return self.ENV_VAR_PATTERN.sub(replacer, data)

        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}

        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]

        return data

    def _parse_config(self, data: dict[str, Any]) -> MuxFSConfig:
        """Parse format-agnostic configuration data into MuxFSConfig."""
        config = MuxFSConfig()

        mounts = data.get("mounts") or {}
        if not isinstance(mounts, dict):
            raise ConfigurationError("mounts", "must be a mapping of identifier to directory")
        for mount_id, directory in mounts.items():
            if not isinstance(directory, str) or not directory:
                raise ConfigurationError("mounts", f"entry {mount_id!r} must map to a directory")
        config.mounts = {str(k): v for k, v in mounts.items()}
        logger.debug("Loaded {count} mounts", count=len(config.mounts))

        config.logging = self._parse_logging_config(data.get("logging") or {})
        return config

    def _parse_logging_config(self, logging_data: dict[str, Any]) -> LoggingConfig:
        """Parse logging configuration with environment variable overrides.

        Environment variables take precedence over config file values:
        - MUXFS_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        - MUXFS_LOG_FORMAT: Output format (console, json, structured, rich)
        - MUXFS_LOG_FILE: Optional file path for log output
        - MUXFS_LOG_COLOR: Use color output (true/false)
        - MUXFS_LOG_TIMESTAMP: Include timestamp (true/false)
        """
        level = logging_data.get("level", "INFO")
        format_type = logging_data.get("format", "structured")
        output_file = logging_data.get("output_file")
        use_color = logging_data.get("use_color", True)
        include_timestamp = logging_data.get("include_timestamp", True)

        if env_level := os.getenv("MUXFS_LOG_LEVEL"):
            level = env_level.upper()
            logger.debug("Overriding log level from env: {}", level)

        if env_format := os.getenv("MUXFS_LOG_FORMAT"):
            format_type = env_format.lower()
            logger.debug("Overriding log format from env: {}", format_type)

        if env_file := os.getenv("MUXFS_LOG_FILE"):
            output_file = env_file
            logger.debug("Overriding log file from env: {}", output_file)

        if env_color := os.getenv("MUXFS_LOG_COLOR"):
            try:
                use_color = _parse_bool_env(env_color)
            except ValueError as e:
                logger.warning("Invalid MUXFS_LOG_COLOR value: {}", e)

        if env_timestamp := os.getenv("MUXFS_LOG_TIMESTAMP"):
            try:
                include_timestamp = _parse_bool_env(env_timestamp)
            except ValueError as e:
                logger.warning("Invalid MUXFS_LOG_TIMESTAMP value: {}", e)

        return LoggingConfig(
            level=cast("Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']", level),
            format=cast("Literal['console', 'json', 'structured', 'rich']", format_type),
            output_file=output_file,
            use_color=use_color,
            include_timestamp=include_timestamp,
        )


def load_config(path: str | Path | None = None) -> MuxFSConfig:
    """Load configuration from file or return defaults.

    An explicit ``path`` that does not exist is an error; when searching,
    finding nothing yields the defaults.
    """
    loader = ConfigLoader()
    if path:
        return loader.load_config_file(path)
    try:
        return loader.load_config_file(None)
    except FileNotFoundError:
        logger.debug("No configuration file found, using defaults")
        return get_default_config()


def get_default_config() -> MuxFSConfig:
    """Get default configuration (no mounts)."""
    return MuxFSConfig()


__all__ = ["ConfigLoader", "get_default_config", "load_config"]
