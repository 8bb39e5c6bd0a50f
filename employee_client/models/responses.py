"""Generic response envelope models.

Server responses are wrapped in ``{ success, data, message }``. Results handed
to the UI use ``{ success, data, error }`` so a failure always arrives as text.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from employee_client.errors import ClientError

T = TypeVar("T")

UNKNOWN_ERROR = "Unknown error"


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope returned by the employee server."""

    success: bool
    data: T | None = None
    message: str | None = None

    def error_message(self) -> str:
        """Return the server's message, or the generic fallback when absent."""
        return self.message if self.message is not None else UNKNOWN_ERROR


class CommandResult(BaseModel, Generic[T]):
    """Outcome of a command binding as seen by the UI layer."""

    success: bool
    data: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T | None = None) -> "CommandResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def from_error(cls, exc: ClientError | str) -> "CommandResult[T]":
        return cls(success=False, error=str(exc))
