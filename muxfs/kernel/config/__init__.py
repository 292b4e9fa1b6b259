"""Configuration loading and management for muxfs."""

from muxfs.kernel.config.loader import ConfigLoader, get_default_config, load_config
from muxfs.kernel.config.models import LoggingConfig, MuxFSConfig

__all__ = [
    "ConfigLoader",
    "LoggingConfig",
    "MuxFSConfig",
    "get_default_config",
    "load_config",
]
