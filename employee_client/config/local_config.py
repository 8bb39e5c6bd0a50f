"""Per-user config file holding the server base URL.

The file lives at ``<app data dir>/config.json`` and contains a single
document ``{ "server_url": str | null }``. A missing file means "no config",
not an error. Writes overwrite in place; one desktop user, one process.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

from pydantic import BaseModel, ValidationError

from employee_client.errors import ConfigIOError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"
DEFAULT_APP_NAME = "employee-manager"


class LocalConfig(BaseModel):
    """Contents of ``config.json``."""

    server_url: str | None = None


def default_config_dir(app_name: str = DEFAULT_APP_NAME) -> Path:
    """Resolve the platform application-data directory for *app_name*.

    Preference order:
    1) Windows: %APPDATA%, then %LOCALAPPDATA%
    2) macOS: ~/Library/Application Support
    3) Elsewhere: $XDG_CONFIG_HOME, then ~/.config
    """
    if sys.platform == "win32":
        for var in ("APPDATA", "LOCALAPPDATA"):
            value = os.environ.get(var)
            if value:
                return Path(value) / app_name
        return Path.home() / "AppData" / "Roaming" / app_name

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / app_name

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / app_name
    return Path.home() / ".config" / app_name


def config_path(config_dir: Path | None = None) -> Path:
    root = default_config_dir() if config_dir is None else config_dir
    return root / CONFIG_FILENAME


def read_local_config(config_dir: Path | None = None) -> LocalConfig | None:
    """Load the config file.

    Returns
    -------
    LocalConfig | None
        Parsed config, or None if no file exists.

    Raises
    ------
    ConfigIOError
        If the file exists but cannot be read or parsed.
    """
    path = config_path(config_dir)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No config file at %s", path)
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigIOError(f"Failed to read config: {exc}", path=str(path)) from exc

    try:
        return LocalConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigIOError(f"Failed to parse config: {exc}", path=str(path)) from exc


def write_local_config(config: LocalConfig, config_dir: Path | None = None) -> Path:
    """Write *config* as pretty-printed JSON, creating the directory if needed.

    Returns the path written.
    """
    path = config_path(config_dir)
    payload = {"server_url": config.server_url}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    except OSError as exc:
        raise ConfigIOError(f"Failed to write config: {exc}", path=str(path)) from exc

    logger.info("Saved config to %s", path)
    return path


def resolve_server_url(default_server_url: str, config_dir: Path | None = None) -> str:
    """Return the configured server URL, falling back to *default_server_url*."""
    config = read_local_config(config_dir)
    if config is not None and config.server_url:
        return config.server_url
    return default_server_url
