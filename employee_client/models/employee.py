"""Employee entity model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class Employee(BaseModel):
    """An employee record as exchanged with the server.

    The field set is open: fields the server adds are preserved. Optional
    fields that were never set stay absent whenever the record is serialized,
    whether sent to the server or relayed to the UI.
    """

    model_config = ConfigDict(extra="allow")

    id: int | None = None  # Assigned by the server
    name: str
    email: str
    department: str
    position: str
    salary: int | float
    hire_date: str

    ssn: str | None = None
    phone: str | None = None
    address: str | None = None
    employee_id: str | None = None
    status: str | None = None  # "Active" | "Inactive" | "On Leave"
    manager: str | None = None

    @model_serializer(mode="wrap")
    def _drop_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        present = self.model_fields_set | set(self.model_extra or {})
        return {key: value for key, value in data.items() if key in present}

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready body, omitting fields that were never set."""
        return self.model_dump(mode="json", exclude_unset=True)
