"""Exceptions raised inside the facade."""


class DataIntegrityError(ValueError):
    """An employee field failed numeric parsing during a derived computation."""

    def __init__(self, employee_id: str | None, field: str, value: object) -> None:
        self.employee_id = employee_id
        self.field = field
        self.value = value
        super().__init__(
            f"Employee {employee_id!r} has a non-integer {field}: {value!r}"
        )
