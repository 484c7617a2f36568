"""Configuration loading and validation."""

from xcdocs.config.loader import load_config
from xcdocs.config.schema import (
    Config,
    ProcessConfig,
    SdkConfig,
    SearchConfig,
    ServerConfig,
)

__all__ = [
    "Config",
    "ProcessConfig",
    "SdkConfig",
    "SearchConfig",
    "ServerConfig",
    "load_config",
]
