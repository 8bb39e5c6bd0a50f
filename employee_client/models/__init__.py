"""Public models for the employee client."""

from employee_client.models.employee import Employee
from employee_client.models.pagination import (
    EmployeeQuery,
    FilterEcho,
    PageInfo,
    PaginatedEmployees,
)
from employee_client.models.responses import ApiResponse, CommandResult
from employee_client.models.stats import DashboardStats, DepartmentStats, HealthStatus

__all__ = [
    "ApiResponse",
    "CommandResult",
    "DashboardStats",
    "DepartmentStats",
    "Employee",
    "EmployeeQuery",
    "FilterEcho",
    "HealthStatus",
    "PageInfo",
    "PaginatedEmployees",
]
