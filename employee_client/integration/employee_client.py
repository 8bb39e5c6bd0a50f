"""HTTP client for the employee server's envelope API.

Every call takes the server base URL as an argument; the client keeps no
session. Responses are wrapped in ``{ success, data, message }`` and each
operation collapses transport, parsing and application failures into a single
ClientError whose message is the text shown to the user.

Decoding is strict for every operation except delete, which first gates on the
HTTP status and then treats an unparseable body as success. No retries.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx
from pydantic import ValidationError

from employee_client.errors import (
    ApplicationError,
    EmptyPayloadError,
    HttpStatusError,
    ParseError,
    TransportError,
)
from employee_client.models.employee import Employee
from employee_client.models.pagination import EmployeeQuery, PaginatedEmployees
from employee_client.models.responses import ApiResponse
from employee_client.models.stats import DashboardStats, DepartmentStats, HealthStatus

logger = logging.getLogger(__name__)

DEFAULT_LIST_ALL_LIMIT = 10000


def decode_envelope(body: str, payload_type: Any) -> ApiResponse:
    """Validate *body* as ``ApiResponse[payload_type]``.

    Raises
    ------
    ParseError
        If the body is not JSON or does not match the envelope shape.
    """
    try:
        return ApiResponse[payload_type].model_validate_json(body)
    except ValidationError as exc:
        raise ParseError(f"Failed to parse JSON: {exc}") from exc


def unwrap_envelope(envelope: ApiResponse, *, require_data: bool = True) -> Any:
    """Return ``envelope.data`` or raise the error the envelope describes.

    Raises
    ------
    ApplicationError
        If the envelope reports ``success: false``.
    EmptyPayloadError
        If *require_data* is set and the envelope succeeded without data.
    """
    if not envelope.success:
        raise ApplicationError(envelope.error_message())
    if envelope.data is None and require_data:
        raise EmptyPayloadError()
    return envelope.data


class EmployeeClient:
    """Envelope API client for employee records.

    Parameters
    ----------
    list_all_limit:
        Page size used by :meth:`list_all_employees` so that one page covers
        the whole data set (default 10000).
    transport:
        Optional httpx transport, used by tests to stand in for the server.
    """

    def __init__(
        self,
        list_all_limit: int = DEFAULT_LIST_ALL_LIMIT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._list_all_limit = list_all_limit
        self._transport = transport

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def list_employees(
        self, server_url: str, query: EmployeeQuery | None = None
    ) -> PaginatedEmployees:
        """Fetch one page of employees.

        Only parameters present on *query* are sent. A successful envelope
        without data yields an empty page.
        """
        url = self._employees_url(server_url)
        query_string = (query or EmployeeQuery()).to_query_string()
        if query_string:
            url = f"{url}?{query_string}"

        response = await self._send("GET", url)
        envelope = decode_envelope(response.text, PaginatedEmployees)
        page = unwrap_envelope(envelope, require_data=False)
        return page if page is not None else PaginatedEmployees()

    async def list_all_employees(
        self, server_url: str, sort_by: str = "name", sort_order: str = "ASC"
    ) -> list[Employee]:
        """Fetch every employee in a single oversized page."""
        query = EmployeeQuery(
            page=1,
            limit=self._list_all_limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        page = await self.list_employees(server_url, query)
        return page.items

    # ------------------------------------------------------------------
    # Single records
    # ------------------------------------------------------------------

    async def get_employee(self, server_url: str, employee_id: int | str) -> Employee:
        response = await self._send("GET", self._employee_url(server_url, employee_id))
        return unwrap_envelope(decode_envelope(response.text, Employee))

    async def create_employee(self, server_url: str, employee: Employee) -> Employee:
        """POST a new employee and return the record the server stored."""
        response = await self._send(
            "POST", self._employees_url(server_url), payload=employee.to_payload()
        )
        return unwrap_envelope(decode_envelope(response.text, Employee))

    async def update_employee(
        self, server_url: str, employee_id: int | str, employee: Employee
    ) -> Employee:
        """PUT the full record for *employee_id* and return the stored result."""
        response = await self._send(
            "PUT",
            self._employee_url(server_url, employee_id),
            payload=employee.to_payload(),
        )
        return unwrap_envelope(decode_envelope(response.text, Employee))

    async def delete_employee(self, server_url: str, employee_id: int | str) -> bool:
        """Delete an employee.

        The status code is checked before the body is looked at: any non-2xx
        status fails immediately. A 2xx response whose body is not an envelope
        (empty, plain text) counts as a successful deletion.

        Raises
        ------
        HttpStatusError
            If the server answers with a non-success status.
        ApplicationError
            If the body is an envelope reporting ``success: false``.
        """
        response = await self._send("DELETE", self._employee_url(server_url, employee_id))

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.reason_phrase)

        try:
            envelope = decode_envelope(response.text, Any)
        except ParseError:
            logger.info(
                "Delete response for employee %s is not an envelope; "
                "treating status %d as success",
                employee_id,
                response.status_code,
            )
            return True

        unwrap_envelope(envelope, require_data=False)
        return True

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    async def dashboard_stats(self, server_url: str) -> DashboardStats:
        response = await self._send("GET", f"{self._base(server_url)}/api/dashboard/stats")
        return unwrap_envelope(decode_envelope(response.text, DashboardStats))

    async def department_stats(self, server_url: str) -> list[DepartmentStats]:
        response = await self._send(
            "GET", f"{self._base(server_url)}/api/dashboard/departments"
        )
        departments = unwrap_envelope(
            decode_envelope(response.text, list[DepartmentStats]), require_data=False
        )
        return departments if departments is not None else []

    async def health(self, server_url: str) -> HealthStatus:
        response = await self._send("GET", f"{self._base(server_url)}/api/health")
        return unwrap_envelope(decode_envelope(response.text, HealthStatus))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _base(server_url: str) -> str:
        return server_url.rstrip("/")

    def _employees_url(self, server_url: str) -> str:
        return f"{self._base(server_url)}/api/employees"

    def _employee_url(self, server_url: str, employee_id: int | str) -> str:
        return f"{self._employees_url(server_url)}/{employee_id}"

    async def _send(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue one request and return the fully read response.

        Raises
        ------
        TransportError
            If no response was received (DNS, connection, timeout).
        """
        started = time.monotonic()
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(method, url, json=payload)
        except httpx.RequestError as exc:
            logger.warning(
                "Request failed: %s %s",
                method,
                url,
                extra={"method": method, "url": url, "error_reason": str(exc)},
            )
            raise TransportError(f"Request failed: {exc}") from exc

        duration_ms = round((time.monotonic() - started) * 1000, 1)
        logger.debug(
            "%s %s -> %d",
            method,
            url,
            response.status_code,
            extra={
                "method": method,
                "url": url,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
