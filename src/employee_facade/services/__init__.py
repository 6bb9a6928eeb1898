"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Upstream API / cache)

Usage:
    ```python
    from employee_facade.services import EmployeeService

    service = EmployeeService.create(client=client, cache=cache)
    ```
"""

from .employee_queries import filter_by_name, max_salary, top_n_by_salary
from .employee_service import EmployeeService

__all__ = [
    "EmployeeService",
    "filter_by_name",
    "max_salary",
    "top_n_by_salary",
]
