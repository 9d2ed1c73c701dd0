"""Configuration: JSON/env loading and the process-wide active config."""

from domwait.config.config_manager import load_config
from domwait.config.runtime_config import configure, configure_logging, get_config, reset_config

__all__ = [
    "load_config",
    "configure",
    "configure_logging",
    "get_config",
    "reset_config",
]
