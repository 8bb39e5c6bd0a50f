"""Listing models: query parameters, page info and the paginated payload.

Pagination values are produced by the server and passed through verbatim;
nothing here recomputes them.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, model_validator

from employee_client.models.employee import Employee

# Wire name for each query field, in the order they are appended to the URL
_QUERY_FIELDS: tuple[tuple[str, str], ...] = (
    ("page", "page"),
    ("limit", "limit"),
    ("search", "search"),
    ("department", "department"),
    ("status", "status"),
    ("sort_by", "sortBy"),
    ("sort_order", "sortOrder"),
    ("min_salary", "minSalary"),
    ("max_salary", "maxSalary"),
)


class EmployeeQuery(BaseModel):
    """Filters, sorting and paging for ``GET /api/employees``.

    Every field is optional; ``None`` means the parameter is left out of the
    request entirely.
    """

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    page: int | None = None
    limit: int | None = None
    search: str | None = None
    department: str | None = None
    status: str | None = None
    sort_by: str | None = Field(default=None, alias="sortBy")
    sort_order: str | None = Field(default=None, alias="sortOrder")
    min_salary: int | float | None = Field(default=None, alias="minSalary")
    max_salary: int | float | None = Field(default=None, alias="maxSalary")

    def to_params(self) -> list[tuple[str, str]]:
        """Return the (wire name, value) pairs that belong in the request.

        Numeric values are kept whenever present, zero included. String values
        are dropped when empty.
        """
        params: list[tuple[str, str]] = []
        for attr, wire_name in _QUERY_FIELDS:
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, str):
                if not value:
                    continue
                params.append((wire_name, value))
            else:
                params.append((wire_name, str(value)))
        return params

    def to_query_string(self) -> str:
        """Percent-encode the present parameters (spaces become ``%20``)."""
        return "&".join(
            f"{name}={quote(value, safe='')}" for name, value in self.to_params()
        )


class PageInfo(BaseModel):
    """Server-computed pagination block."""

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_records: int = Field(alias="totalRecords")
    page_size: int = Field(alias="pageSize")
    has_next_page: bool = Field(alias="hasNextPage")
    has_previous_page: bool = Field(alias="hasPreviousPage")


class FilterEcho(BaseModel):
    """Filters the server reports having applied. Open record."""

    model_config = ConfigDict(extra="allow")


class PaginatedEmployees(BaseModel):
    """One page of employees with its pagination block and filter echo."""

    items: list[Employee] = Field(default_factory=list)
    pagination: PageInfo | None = None
    filters: FilterEcho = Field(default_factory=FilterEcho)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_list(cls, data: Any) -> Any:
        # Older servers answer the listing with a plain array of employees
        if isinstance(data, list):
            return {"items": data}
        return data
