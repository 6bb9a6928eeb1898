"""Request DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class CreateEmployeeRequest(BaseModel):
    """Request DTO for creating an employee.

    Salary and age may be sent as JSON numbers or strings; both are
    forwarded to the upstream as decimal strings.
    """

    name: str = Field(..., description="Employee display name", min_length=1)
    salary: str = Field(..., description="Yearly salary, non-negative integer", pattern=r"^\d+$")
    age: str = Field(..., description="Age in years", pattern=r"^\d+$")

    @field_validator("salary", "age", mode="before")
    @classmethod
    def _int_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
