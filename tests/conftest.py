"""
Shared fixtures for the employee facade tests.
"""

import asyncio
from collections.abc import Callable

import httpx
import pytest

from employee_facade.entities import Failure
from employee_facade.protocols import UpstreamResponse
from employee_facade.repositories import HttpUpstreamClient, InMemoryEmployeeCache
from employee_facade.services import EmployeeService

BASE_URL = "http://upstream.test/api/v1/"


def record(employee_id: str, name: str, salary: str | int, age: str | int = "30") -> dict:
    """One employee as the upstream lists it."""
    return {
        "id": employee_id,
        "employee_name": name,
        "employee_salary": salary,
        "employee_age": age,
        "profile_image": "",
    }


def list_body(*records: dict, status: str = "success") -> dict:
    return {"status": status, "data": list(records), "message": "Successfully! All records has been fetched."}


def ok(body: object = None, status_code: int = 200) -> UpstreamResponse:
    return UpstreamResponse(status_code=status_code, body=body)


def mock_upstream(handler: Callable[[httpx.Request], httpx.Response]) -> HttpUpstreamClient:
    """An HttpUpstreamClient whose requests are answered by ``handler``."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
    return HttpUpstreamClient(http_client=http_client, base_url=BASE_URL)


class FakeUpstreamClient:
    """In-process UpstreamClient returning canned outcomes and recording calls."""

    def __init__(
        self,
        list_outcome: UpstreamResponse | Failure | None = None,
        get_outcome: UpstreamResponse | Failure | None = None,
        create_outcome: UpstreamResponse | Failure | None = None,
        delete_outcome: UpstreamResponse | Failure | None = None,
        delay: float = 0.0,
    ) -> None:
        self.list_outcome = list_outcome or ok(list_body())
        self.get_outcome = get_outcome
        self.create_outcome = create_outcome
        self.delete_outcome = delete_outcome
        self.delay = delay
        self.calls: list[tuple] = []
        self.closed = False

    async def list_employees(self) -> UpstreamResponse | Failure:
        self.calls.append(("list",))
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.list_outcome

    async def get_employee(self, employee_id: str) -> UpstreamResponse | Failure:
        self.calls.append(("get", employee_id))
        return self.get_outcome

    async def create_employee(self, name: str, salary: str, age: str) -> UpstreamResponse | Failure:
        self.calls.append(("create", name, salary, age))
        return self.create_outcome

    async def delete_employee(self, employee_id: str) -> UpstreamResponse | Failure:
        self.calls.append(("delete", employee_id))
        return self.delete_outcome

    async def close(self) -> None:
        self.closed = True

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def two_employees_body() -> dict:
    return list_body(record("1", "John Doe", "50000"), record("2", "Jane Smith", "60000", "35"))


@pytest.fixture
def cache() -> InMemoryEmployeeCache:
    return InMemoryEmployeeCache(cache_key="allEmployees")


@pytest.fixture
def make_service(cache):
    """Build an EmployeeService around a FakeUpstreamClient."""

    def _make(**outcomes) -> tuple[EmployeeService, FakeUpstreamClient]:
        client = FakeUpstreamClient(**outcomes)
        return EmployeeService(client=client, cache=cache, top_n=10), client

    return _make
