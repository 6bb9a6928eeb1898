"""
Tests for the employee facade API.

The app runs against a real EmployeeService whose upstream is an
httpx.MockTransport, so requests go through every layer.
"""

from urllib.parse import parse_qs

import httpx
import pytest
from conftest import list_body, mock_upstream, record
from fastapi.testclient import TestClient

from employee_facade.api.app import app
from employee_facade.api.dependencies import get_handler
from employee_facade.handlers import EmployeeHandler
from employee_facade.repositories import HttpUpstreamClient, InMemoryEmployeeCache
from employee_facade.services import EmployeeService


class FakeUpstream:
    """Routes upstream requests to canned responses and counts them."""

    def __init__(self) -> None:
        self.employees = list_body(
            record("1", "John Doe", "50000", "30"),
            record("2", "Jane Smith", "60000", "35"),
            record("3", "Johnny Bravo", "70000", "41"),
        )
        self.requests: list[httpx.Request] = []
        self.fail_list = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/v1/")

        if request.method == "GET" and path == "employees":
            if self.fail_list:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, json=self.employees)
        if request.method == "GET" and path == "employee/1":
            return httpx.Response(200, json={"status": "success", "data": record("1", "John Doe", "50000")})
        if request.method == "POST" and path == "create":
            form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
            return httpx.Response(200, json={"status": "success", "data": {**form, "id": 4417}})
        if request.method == "DELETE" and path == "delete/1":
            return httpx.Response(200, json={"status": "success", "message": "Successfully! Record has been deleted"})
        return httpx.Response(404)

    def count(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == f"/api/v1/{path}")


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def client(upstream):
    """Create a test client wired to the fake upstream."""
    service = EmployeeService.create(
        client=mock_upstream(upstream),
        cache=InMemoryEmployeeCache.create(cache_key="allEmployees"),
        top_n=10,
    )
    handler = EmployeeHandler(employee_service=service)
    app.dependency_overrides[get_handler] = lambda: handler
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Employee Facade API"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["cache_populated"] is False


def test_list_employees(client):
    response = client.get("/api/v1/employee")
    assert response.status_code == 200
    data = response.json()
    assert [e["employee_name"] for e in data] == ["John Doe", "Jane Smith", "Johnny Bravo"]
    assert data[0] == {
        "id": "1",
        "employee_name": "John Doe",
        "employee_salary": "50000",
        "employee_age": "30",
        "profile_image": "",
    }


def test_list_is_cached(client, upstream):
    client.get("/api/v1/employee")
    client.get("/api/v1/employee/search/jane")
    client.get("/api/v1/employee/highestSalary")

    assert upstream.count("GET", "employees") == 1
    assert client.get("/stats").json()["populated"] is True


def test_list_transport_failure_is_500(client, upstream):
    upstream.fail_list = True

    response = client.get("/api/v1/employee")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_search(client):
    response = client.get("/api/v1/employee/search/JOHN")
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == ["1", "3"]


def test_search_without_match_is_404(client):
    response = client.get("/api/v1/employee/search/zelda")
    assert response.status_code == 404


def test_highest_salary(client):
    response = client.get("/api/v1/employee/highestSalary")
    assert response.status_code == 200
    assert response.json() == 70000


def test_top_ten_names(client):
    response = client.get("/api/v1/employee/topTenHighestEarningEmployeeNames")
    assert response.status_code == 200
    assert response.json() == ["Johnny Bravo", "Jane Smith", "John Doe"]


def test_highest_salary_with_malformed_data_is_500(client, upstream):
    upstream.employees = list_body(record("1", "Ann", "100"), record("2", "Bob", "n/a"))

    response = client.get("/api/v1/employee/highestSalary")

    assert response.status_code == 500
    assert response.json() == {"detail": "Employee data is malformed"}


def test_get_employee_bypasses_cache(client, upstream):
    response = client.get("/api/v1/employee/1")

    assert response.status_code == 200
    assert response.json()["employee_name"] == "John Doe"
    assert upstream.count("GET", "employees") == 0


def test_get_unknown_employee_mirrors_404(client):
    response = client.get("/api/v1/employee/12345")
    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_create_employee(client, upstream):
    response = client.post("/api/v1/employee", json={"name": "Ann", "salary": 70000, "age": "28"})

    assert response.status_code == 201
    assert response.json() == {
        "id": "4417",
        "employee_name": "Ann",
        "employee_salary": "70000",
        "employee_age": "28",
        "profile_image": "",
    }
    assert upstream.count("POST", "create") == 1


@pytest.mark.parametrize(
    "body",
    [
        {"salary": "100", "age": "30"},
        {"name": "", "salary": "100", "age": "30"},
        {"name": "Ann", "salary": "lots", "age": "30"},
        {"name": "Ann", "salary": "100", "age": "-1"},
    ],
)
def test_create_employee_validation(client, upstream, body):
    response = client.post("/api/v1/employee", json=body)

    assert response.status_code == 422
    assert upstream.requests == []


def test_delete_employee_returns_plain_text(client):
    response = client.delete("/api/v1/employee/1")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Successfully! Record has been deleted"


def test_delete_unknown_employee(client):
    response = client.delete("/api/v1/employee/9")

    assert response.status_code == 404
    assert response.json() == {"detail": "Failed to delete the employee with ID: 9"}


def test_stats(client):
    client.get("/api/v1/employee")
    client.get("/api/v1/employee")

    response = client.get("/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["cache_key"] == "allEmployees"
    assert data["cached_employees"] == 3
    assert data["writes"] == 1


@pytest.fixture
def lifespan_http_clients(monkeypatch, upstream) -> list[httpx.AsyncClient]:
    """Point the lifespan's HttpUpstreamClient.create() at the fake upstream."""
    http_clients: list[httpx.AsyncClient] = []

    def create(cls, base_url=None, timeout=None):
        upstream_client = mock_upstream(upstream)
        http_clients.append(upstream_client.client)
        return upstream_client

    monkeypatch.setattr(HttpUpstreamClient, "create", classmethod(create))
    return http_clients


def test_lifespan_wires_app_state(lifespan_http_clients):
    with TestClient(app) as live:
        assert isinstance(app.state.employee_handler, EmployeeHandler)
        assert isinstance(app.state.employee_service, EmployeeService)

        response = live.get("/api/v1/employee")
        assert response.status_code == 200
        assert len(response.json()) == 3
        assert live.get("/stats").json()["populated"] is True

    assert not hasattr(app.state, "employee_handler")
    assert not hasattr(app.state, "employee_service")
    assert lifespan_http_clients[0].is_closed


def test_lifespan_serves_every_route(lifespan_http_clients, upstream):
    with TestClient(app) as live:
        assert live.get("/health").json()["status"] == "healthy"
        assert live.get("/api/v1/employee/search/jane").status_code == 200
        assert live.get("/api/v1/employee/highestSalary").json() == 70000
        assert live.get("/api/v1/employee/1").status_code == 200
        assert live.post("/api/v1/employee", json={"name": "Ann", "salary": "1", "age": "2"}).status_code == 201
        assert live.delete("/api/v1/employee/1").status_code == 200

    assert upstream.count("GET", "employees") == 1
