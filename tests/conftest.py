"""Shared test fixtures for the employee client test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import pytest

from employee_client.commands import CommandContext
from employee_client.config.settings import ClientSettings
from employee_client.integration.employee_client import EmployeeClient

SERVER_URL = "http://employees.test:4001"

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Data fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def server_url() -> str:
    return SERVER_URL


@pytest.fixture
def employee_payload() -> dict:
    return {
        "id": 7,
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "department": "Engineering",
        "position": "Analyst",
        "salary": 95000,
        "hire_date": "2021-03-15",
    }


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_client() -> Callable[[Handler], EmployeeClient]:
    """Return a factory building an EmployeeClient backed by *handler*."""

    def _factory(handler: Handler, list_all_limit: int = 10000) -> EmployeeClient:
        return EmployeeClient(
            list_all_limit=list_all_limit,
            transport=httpx.MockTransport(handler),
        )

    return _factory


@pytest.fixture
def settings(tmp_path: Path) -> ClientSettings:
    """Test settings writing config into a temporary directory."""
    return ClientSettings(config_dir=tmp_path / "config")


@pytest.fixture
def make_context(settings: ClientSettings) -> Callable[[Handler], CommandContext]:
    """Return a factory building a CommandContext backed by *handler*."""

    def _factory(handler: Handler) -> CommandContext:
        client = EmployeeClient(
            list_all_limit=settings.list_all_limit,
            transport=httpx.MockTransport(handler),
        )
        return CommandContext(settings=settings, client=client)

    return _factory
