"""Client bindings for the employee management server."""

from employee_client.commands import COMMANDS, CommandContext, invoke
from employee_client.errors import (
    ApplicationError,
    ClientError,
    ConfigIOError,
    EmptyPayloadError,
    HttpStatusError,
    ParseError,
    TransportError,
)
from employee_client.integration.employee_client import EmployeeClient

__all__ = [
    "COMMANDS",
    "ApplicationError",
    "ClientError",
    "CommandContext",
    "ConfigIOError",
    "EmployeeClient",
    "EmptyPayloadError",
    "HttpStatusError",
    "ParseError",
    "TransportError",
    "invoke",
]
