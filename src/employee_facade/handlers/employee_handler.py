"""HTTP handlers for employee operations.

Handlers convert between service results and DTOs (API contracts).
They handle HTTP concerns like status codes and error responses.
"""

from typing import NoReturn

from fastapi import HTTPException

from employee_facade.config import settings
from employee_facade.dto import (
    CacheStatsResponse,
    CreateEmployeeRequest,
    EmployeeItem,
    HealthCheckResponse,
)
from employee_facade.entities import Employees, Failure
from employee_facade.services import EmployeeService


def _raise_for(failure: Failure) -> NoReturn:
    raise HTTPException(status_code=failure.status_code, detail=failure.message)


def _items(result: Employees) -> list[EmployeeItem]:
    return [EmployeeItem.from_entity(e) for e in result.employees]


class EmployeeHandler:
    """HTTP handlers for employee operations.

    This handler delegates business logic to EmployeeService and handles
    HTTP-specific concerns like:
    - Converting entities to DTOs
    - Turning Failure results into HTTPException with the mapped status

    Example:
        ```python
        handler = EmployeeHandler(employee_service=service)

        @router.get("/search/{search_string}", response_model=list[EmployeeItem])
        async def search(search_string: str):
            return await handler.search(search_string)
        ```
    """

    def __init__(self, employee_service: EmployeeService) -> None:
        """Initialize the employee handler.

        Args:
            employee_service: The employee service for business logic (required).
        """
        self._service = employee_service

    async def list_employees(self) -> list[EmployeeItem]:
        """Handle GET /api/v1/employee requests."""
        result = await self._service.list_employees()
        if isinstance(result, Failure):
            _raise_for(result)
        return _items(result)

    async def search(self, search_string: str) -> list[EmployeeItem]:
        """Handle GET /api/v1/employee/search/{search_string} requests."""
        result = await self._service.search(search_string)
        if isinstance(result, Failure):
            _raise_for(result)
        return _items(result)

    async def highest_salary(self) -> int:
        """Handle GET /api/v1/employee/highestSalary requests."""
        result = await self._service.highest_salary()
        if isinstance(result, Failure):
            _raise_for(result)
        return result.value

    async def top_ten_names(self) -> list[str]:
        """Handle GET /api/v1/employee/topTenHighestEarningEmployeeNames requests."""
        result = await self._service.top_ten_names()
        if isinstance(result, Failure):
            _raise_for(result)
        return list(result.names)

    async def get_employee(self, employee_id: str) -> EmployeeItem:
        """Handle GET /api/v1/employee/{id} requests."""
        result = await self._service.get_by_id(employee_id)
        if isinstance(result, Failure):
            _raise_for(result)
        return EmployeeItem.from_entity(result.employees[0])

    async def create_employee(self, request: CreateEmployeeRequest) -> EmployeeItem:
        """Handle POST /api/v1/employee requests.

        Args:
            request: The validated create request DTO

        Returns:
            The created employee

        Raises:
            HTTPException: If the upstream did not create the employee
        """
        result = await self._service.create_employee(
            name=request.name,
            salary=request.salary,
            age=request.age,
        )
        if isinstance(result, Failure):
            _raise_for(result)
        return EmployeeItem.from_entity(result.employees[0])

    async def delete_employee(self, employee_id: str) -> str:
        """Handle DELETE /api/v1/employee/{id} requests.

        Returns:
            The upstream's confirmation message
        """
        result = await self._service.delete(employee_id)
        if isinstance(result, Failure):
            _raise_for(result)
        return result.message or f"Employee with ID {employee_id} deleted"

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /stats requests."""
        return CacheStatsResponse(**self._service.get_stats())

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        stats = self._service.get_stats()
        return HealthCheckResponse(
            status="healthy",
            cache_populated=stats.get("populated", False),
            upstream_base_url=settings.upstream_base_url,
        )
