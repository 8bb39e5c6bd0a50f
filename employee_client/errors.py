"""Client error hierarchy.

Every failure the client can surface extends ClientError. The message of each
error is the human-readable text handed back to the UI layer; there are no
structured error codes beyond the class itself.
"""

from __future__ import annotations


class ClientError(Exception):
    """Base error for all employee client failures."""

    message: str = "Unknown error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message if message is not None else self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class TransportError(ClientError):
    """The HTTP request never produced a response (DNS, connect, timeout)."""

    message = "Request failed"


class HttpStatusError(ClientError):
    """Server answered with a non-success status code."""

    message = "Server returned error"

    def __init__(self, status_code: int, reason: str = "", **kwargs: object) -> None:
        self.status_code = status_code
        text = f"Server returned error: {status_code}"
        if reason:
            text = f"{text} {reason}"
        super().__init__(text, status_code=status_code, **kwargs)


class ParseError(ClientError):
    """Response body is not valid JSON or does not match the envelope shape."""

    message = "Failed to parse JSON"


class ApplicationError(ClientError):
    """Envelope reported ``success: false``."""

    message = "Unknown error"


class EmptyPayloadError(ClientError):
    """Envelope reported success but carried no ``data``."""

    message = "Server reported success but returned no data"


class ConfigIOError(ClientError):
    """Local config file could not be read, parsed or written."""

    message = "Config file error"
