"""Integration with the remote employee server."""

from employee_client.integration.employee_client import (
    DEFAULT_LIST_ALL_LIMIT,
    EmployeeClient,
    decode_envelope,
    unwrap_envelope,
)

__all__ = [
    "DEFAULT_LIST_ALL_LIMIT",
    "EmployeeClient",
    "decode_envelope",
    "unwrap_envelope",
]
