"""Dashboard and health payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DashboardStats(BaseModel):
    """Headline numbers for the dashboard."""

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    total_employees: int = Field(alias="totalEmployees")
    total_departments: int = Field(alias="totalDepartments")
    average_salary: float = Field(alias="averageSalary")
    recent_hires: int = Field(alias="recentHires")


class DepartmentStats(BaseModel):
    """Per-department head count and average salary."""

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    department: str
    employee_count: int = Field(alias="employeeCount")
    average_salary: float = Field(alias="averageSalary")


class HealthStatus(BaseModel):
    status: str
    timestamp: str | None = None
