"""Employee service for core business logic.

This service orchestrates the facade by coordinating the upstream client
(data access), the employee cache and the query functions.
"""

import asyncio
import logging

from employee_facade.config import settings
from employee_facade.entities import Employee, Employees, Failure, FailureKind, Names, Scalar
from employee_facade.errors import DataIntegrityError
from employee_facade.protocols import EmployeeStore, UpstreamClient

from .employee_queries import filter_by_name, max_salary, top_n_by_salary
from .response_normalizer import normalize_create, normalize_delete, normalize_get, normalize_list

logger = logging.getLogger(__name__)

NO_EMPLOYEES_MESSAGE = "No employees found"
MALFORMED_DATA_MESSAGE = "Employee data is malformed"


class EmployeeService:
    """Core facade orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - UpstreamClient: httpx today, anything with the same methods tomorrow
    - EmployeeStore: in-memory cache, or any other single-slot store

    The full employee list is read through the cache. Single-record
    operations (get, create, delete) always go to the upstream and never
    touch the cache, so the cached list reflects the last full fetch only.

    Example:
        ```python
        from employee_facade.repositories import HttpUpstreamClient, InMemoryEmployeeCache
        from employee_facade.services import EmployeeService

        service = EmployeeService.create(
            client=HttpUpstreamClient.create(),
            cache=InMemoryEmployeeCache.create(),
        )
        result = await service.search("doe")
        ```
    """

    def __init__(
        self,
        client: UpstreamClient,
        cache: EmployeeStore,
        top_n: int | None = None,
    ) -> None:
        """Initialize the employee service.

        Args:
            client: Upstream employee API client (required).
            cache: Store for the full employee list (required).
            top_n: How many names the top earners view returns. Defaults to settings.

        Raises:
            ValueError: If top_n is below 1
        """
        self._client = client
        self._cache = cache
        self._top_n = settings.top_earners_limit if top_n is None else top_n
        if self._top_n < 1:
            raise ValueError("top_n must be greater than 0")
        self._fetch_lock = asyncio.Lock()

    @classmethod
    def create(
        cls,
        client: UpstreamClient,
        cache: EmployeeStore,
        top_n: int | None = None,
    ) -> "EmployeeService":
        """Factory method to create EmployeeService.

        Args:
            client: Upstream employee API client (required).
            cache: Store for the full employee list (required).
            top_n: Size of the top earners view. If None, uses settings.

        Returns:
            Configured EmployeeService instance
        """
        return cls(client=client, cache=cache, top_n=top_n)

    async def get_all_employees(self) -> tuple[Employee, ...]:
        """Return the employee list from the cache, fetching it on a miss.

        A failed fetch yields an empty tuple; use list_employees() to see
        the failure itself.
        """
        outcome = await self._load_employees()
        if isinstance(outcome, Failure):
            return ()
        return outcome.employees

    async def list_employees(self) -> Employees | Failure:
        """List all employees, read through the cache.

        Returns:
            Employees(200, ...), the fetch Failure, or Failure(NO_EMPLOYEES) when empty
        """
        outcome = await self._load_employees()
        if isinstance(outcome, Failure):
            return outcome
        if not outcome.employees:
            logger.warning("Employee list is empty")
            return _no_employees()
        return outcome

    async def search(self, term: str) -> Employees | Failure:
        """Find employees whose name contains ``term`` (case-insensitive).

        Business logic:
        1. Load the employee list (cache first)
        2. An empty list is NO_EMPLOYEES, an empty match is NO_MATCH
        3. Otherwise return the matches in list order

        Args:
            term: Substring to look for in employee names

        Returns:
            Employees(200, matches) or a Failure
        """
        outcome = await self._load_employees()
        if isinstance(outcome, Failure):
            return outcome
        if not outcome.employees:
            return _no_employees()

        matches = filter_by_name(outcome.employees, term)
        if not matches:
            return Failure(FailureKind.NO_MATCH, 404, f"No employees found matching '{term}'")
        return Employees(status_code=200, employees=tuple(matches))

    async def highest_salary(self) -> Scalar | Failure:
        """Return the highest salary among all employees."""
        outcome = await self._load_employees()
        if isinstance(outcome, Failure):
            return outcome
        if not outcome.employees:
            return _no_employees()

        try:
            value = max_salary(outcome.employees)
        except DataIntegrityError as e:
            return _malformed(e)
        return Scalar(value=value)

    async def top_ten_names(self) -> Names | Failure:
        """Return the names of the best-paid employees, highest first."""
        outcome = await self._load_employees()
        if isinstance(outcome, Failure):
            return outcome
        if not outcome.employees:
            return _no_employees()

        try:
            names = top_n_by_salary(outcome.employees, self._top_n)
        except DataIntegrityError as e:
            return _malformed(e)
        return Names(names=tuple(names))

    async def get_by_id(self, employee_id: str) -> Employees | Failure:
        """Fetch one employee straight from the upstream (no cache)."""
        outcome = await self._client.get_employee(employee_id)
        return normalize_get(outcome, employee_id)

    async def create_employee(self, name: str, salary: str, age: str) -> Employees | Failure:
        """Create an employee upstream (the cached list is not refreshed)."""
        outcome = await self._client.create_employee(name=name, salary=salary, age=age)
        return normalize_create(outcome)

    async def delete(self, employee_id: str) -> Employees | Failure:
        """Delete an employee upstream (the cached list is not refreshed)."""
        outcome = await self._client.delete_employee(employee_id)
        return normalize_delete(outcome, employee_id)

    async def _load_employees(self) -> Employees | Failure:
        cached = self._cache.get()
        if cached is not None:
            logger.debug("Serving %d employees from cache", len(cached))
            return Employees(status_code=200, employees=cached)

        # One fetch per cold cache; concurrent callers wait and reuse it
        async with self._fetch_lock:
            cached = self._cache.get()
            if cached is not None:
                return Employees(status_code=200, employees=cached)

            outcome = normalize_list(await self._client.list_employees())
            if isinstance(outcome, Failure):
                logger.warning(
                    "Fetching employees failed: %s %s (%s)",
                    outcome.status_code,
                    outcome.message,
                    outcome.kind.value,
                )
                return outcome

            self._cache.put(outcome.employees)
            return outcome

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        return self._cache.get_stats()

    async def close(self) -> None:
        """Release the upstream client."""
        await self._client.close()

    @property
    def top_n(self) -> int:
        return self._top_n


def _no_employees() -> Failure:
    return Failure(FailureKind.NO_EMPLOYEES, 404, NO_EMPLOYEES_MESSAGE)


def _malformed(error: DataIntegrityError) -> Failure:
    logger.error("Derived view aborted: %s", error)
    return Failure(FailureKind.DATA_INTEGRITY, 500, MALFORMED_DATA_MESSAGE)
