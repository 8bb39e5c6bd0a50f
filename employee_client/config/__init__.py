"""Configuration module: settings and the local config file."""

from employee_client.config.local_config import (
    LocalConfig,
    config_path,
    default_config_dir,
    read_local_config,
    resolve_server_url,
    write_local_config,
)
from employee_client.config.settings import ClientSettings

__all__ = [
    "ClientSettings",
    "LocalConfig",
    "config_path",
    "default_config_dir",
    "read_local_config",
    "resolve_server_url",
    "write_local_config",
]
