"""Command bindings invoked by the desktop UI.

Each binding takes plain arguments (dicts are validated into models), forwards
to the employee client or the local config file, and returns a CommandResult.
Failures never propagate to the UI as exceptions: a ClientError, or invalid
caller input, becomes ``CommandResult(success=False, error=<text>)``.

Bindings are registered by name in ``COMMANDS`` so the shell can dispatch
through :func:`invoke`.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from employee_client.config.local_config import (
    LocalConfig,
    default_config_dir,
    read_local_config,
    write_local_config,
)
from employee_client.config.settings import ClientSettings
from employee_client.errors import ClientError
from employee_client.integration.employee_client import EmployeeClient
from employee_client.models.employee import Employee
from employee_client.models.pagination import EmployeeQuery
from employee_client.models.responses import CommandResult

logger = logging.getLogger(__name__)

CommandFunc = Callable[..., Awaitable[CommandResult]]

COMMANDS: dict[str, CommandFunc] = {}


@dataclass(frozen=True)
class CommandContext:
    """Collaborators shared by the bindings. Holds no per-call state."""

    settings: ClientSettings
    client: EmployeeClient

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> "CommandContext":
        settings = settings or ClientSettings()
        client = EmployeeClient(list_all_limit=settings.list_all_limit)
        return cls(settings=settings, client=client)

    @property
    def config_dir(self) -> Path:
        if self.settings.config_dir is not None:
            return self.settings.config_dir
        return default_config_dir(self.settings.app_name)


@functools.lru_cache(maxsize=1)
def default_context() -> CommandContext:
    """Context built from environment settings on first use."""
    return CommandContext.from_settings()


def command(name: str) -> Callable[[Callable[..., Awaitable[Any]]], CommandFunc]:
    """Register a binding under *name* and wrap its outcome in a CommandResult.

    Raises
    ------
    ValueError
        If a binding with the same name is already registered.
    """

    def decorator(func: Callable[..., Awaitable[Any]]) -> CommandFunc:
        if name in COMMANDS:
            raise ValueError(f"Command '{name}' is already registered")

        @functools.wraps(func)
        async def wrapper(*args: Any, context: CommandContext | None = None, **kwargs: Any) -> CommandResult:
            ctx = context or default_context()
            try:
                data = await func(ctx, *args, **kwargs)
            except ClientError as exc:
                logger.warning(
                    "Command %s failed: %s",
                    name,
                    exc.message,
                    extra={"command": name, "error_reason": type(exc).__name__},
                )
                return CommandResult.from_error(exc)
            except ValidationError as exc:
                logger.warning(
                    "Command %s rejected its arguments",
                    name,
                    extra={"command": name, "error_reason": "ValidationError"},
                )
                return CommandResult.from_error(f"Invalid arguments: {exc}")
            return CommandResult.ok(data)

        COMMANDS[name] = wrapper
        return wrapper

    return decorator


async def invoke(name: str, /, **kwargs: Any) -> CommandResult:
    """Dispatch the binding registered as *name*.

    Raises
    ------
    KeyError
        If no binding is registered under *name*.
    """
    try:
        func = COMMANDS[name]
    except KeyError:
        raise KeyError(f"No command registered as '{name}'") from None
    return await func(**kwargs)


def _as_employee(employee: Employee | dict[str, Any]) -> Employee:
    if isinstance(employee, Employee):
        return employee
    return Employee.model_validate(employee)


def _as_query(params: EmployeeQuery | dict[str, Any] | None) -> EmployeeQuery:
    if params is None:
        return EmployeeQuery()
    if isinstance(params, EmployeeQuery):
        return params
    return EmployeeQuery.model_validate(params)


# ---------------------------------------------------------------------------
# Employee bindings
# ---------------------------------------------------------------------------


@command("fetch_employees")
async def fetch_employees(
    ctx: CommandContext, server_url: str, sort_by: str = "name", sort_order: str = "ASC"
) -> list[Employee]:
    return await ctx.client.list_all_employees(server_url, sort_by=sort_by, sort_order=sort_order)


@command("fetch_employees_page")
async def fetch_employees_page(
    ctx: CommandContext,
    server_url: str,
    params: EmployeeQuery | dict[str, Any] | None = None,
):
    return await ctx.client.list_employees(server_url, _as_query(params))


@command("get_employee")
async def get_employee(ctx: CommandContext, server_url: str, id: int) -> Employee:
    return await ctx.client.get_employee(server_url, id)


@command("create_employee")
async def create_employee(
    ctx: CommandContext, server_url: str, employee: Employee | dict[str, Any]
) -> Employee:
    return await ctx.client.create_employee(server_url, _as_employee(employee))


@command("update_employee")
async def update_employee(
    ctx: CommandContext, server_url: str, id: int, employee: Employee | dict[str, Any]
) -> Employee:
    return await ctx.client.update_employee(server_url, id, _as_employee(employee))


@command("delete_employee")
async def delete_employee(ctx: CommandContext, server_url: str, id: int) -> bool:
    return await ctx.client.delete_employee(server_url, id)


# ---------------------------------------------------------------------------
# Dashboard bindings
# ---------------------------------------------------------------------------


@command("fetch_dashboard_stats")
async def fetch_dashboard_stats(ctx: CommandContext, server_url: str):
    return await ctx.client.dashboard_stats(server_url)


@command("fetch_department_stats")
async def fetch_department_stats(ctx: CommandContext, server_url: str):
    return await ctx.client.department_stats(server_url)


@command("check_health")
async def check_health(ctx: CommandContext, server_url: str):
    return await ctx.client.health(server_url)


# ---------------------------------------------------------------------------
# Local config bindings
# ---------------------------------------------------------------------------


@command("read_external_config")
async def read_external_config(ctx: CommandContext) -> LocalConfig | None:
    """Return the saved config, or None (still a success) if there is none."""
    return read_local_config(ctx.config_dir)


@command("write_external_config")
async def write_external_config(ctx: CommandContext, server_url: str | None) -> LocalConfig:
    config = LocalConfig(server_url=server_url)
    write_local_config(config, ctx.config_dir)
    return config
