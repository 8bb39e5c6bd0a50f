"""Pydantic Settings for the employee client.

All environment variables use the EMPLOYEE_CLIENT_ prefix.
Example: EMPLOYEE_CLIENT_LOG_LEVEL=DEBUG, EMPLOYEE_CLIENT_CONFIG_DIR=/tmp/em
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Server
    default_server_url: str = "http://localhost:3001"  # Used when no config file sets one

    # Logging
    log_level: str = "INFO"

    # Listing
    list_all_limit: int = Field(default=10000, ge=1)  # One page covers realistic data sizes

    # Local config file
    app_name: str = Field(default="employee-manager", min_length=1)
    config_dir: Path | None = None  # Overrides the platform app-data directory

    model_config = {"env_prefix": "EMPLOYEE_CLIENT_"}
