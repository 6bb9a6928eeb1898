"""DTOs for bodies returned by the upstream employee API.

The upstream is loose about types: ids, salaries and ages arrive either as
JSON strings or as JSON numbers. Every scalar is normalized to its decimal
string here so the rest of the code only ever sees strings.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from employee_facade.entities import Employee

SUCCESS = "success"


def to_wire_string(value: Any) -> str | None:
    """Convert a JSON scalar to the string form the upstream intends."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise ValueError("boolean is not a valid employee field value")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # Malformed values like 1.5 are kept so numeric views can reject them
        return str(int(value)) if value.is_integer() else str(value)
    raise ValueError(f"expected a JSON scalar, got {type(value).__name__}")


class UpstreamEmployee(BaseModel):
    """One employee record as listed by the upstream API."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    employee_name: str | None = None
    employee_salary: str | None = None
    employee_age: str | None = None
    profile_image: str | None = None

    @field_validator(
        "id", "employee_name", "employee_salary", "employee_age", "profile_image", mode="before"
    )
    @classmethod
    def _stringify(cls, value: Any) -> str | None:
        return to_wire_string(value)

    def to_entity(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.employee_name,
            salary=self.employee_salary,
            age=self.employee_age,
            profile_image=self.profile_image or "",
        )


class UpstreamEnvelope(BaseModel):
    """The ``{status, data, message}`` body of list, get and delete calls."""

    model_config = ConfigDict(extra="ignore")

    status: str | None = None
    data: list[UpstreamEmployee] | None = None
    message: str | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _wrap_single_record(cls, value: Any) -> Any:
        # get-by-id sends one object instead of a one-element list
        if isinstance(value, dict):
            return [value]
        return value

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS

    def employees(self) -> tuple[Employee, ...]:
        return tuple(record.to_entity() for record in self.data or ())


class UpstreamCreatedEmployee(BaseModel):
    """The ``data`` object of a create response (plain field names)."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None
    salary: str | None = None
    age: str | None = None

    @field_validator("id", "name", "salary", "age", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str | None:
        return to_wire_string(value)

    def to_entity(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            salary=self.salary,
            age=self.age,
            profile_image="",
        )


class UpstreamCreateBody(BaseModel):
    """Body of a create response: ``{status, data: {name, salary, age, id}}``."""

    model_config = ConfigDict(extra="ignore")

    status: str | None = None
    data: UpstreamCreatedEmployee | None = Field(default=None)
    message: str | None = None
