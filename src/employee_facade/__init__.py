"""Employee Facade - cached, normalized access to a third-party employee API.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (UpstreamClient, EmployeeStore)
    - repositories: httpx upstream client, in-memory employee cache
    - services: Orchestration, response normalization, query functions
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (upstream bodies and API contracts)
    - entities: Domain models and result variants (internal)

Usage:
    ```python
    from employee_facade.repositories import HttpUpstreamClient, InMemoryEmployeeCache
    from employee_facade.services import EmployeeService

    service = EmployeeService.create(
        client=HttpUpstreamClient.create(),
        cache=InMemoryEmployeeCache.create(),
    )
    ```

For HTTP API:
    ```python
    from employee_facade.api.app import app
    ```
"""

from employee_facade.config import configure_logging, get_http_client, settings
from employee_facade.dto import CreateEmployeeRequest, EmployeeItem
from employee_facade.entities import Employee, Employees, Failure, FailureKind, Names, Scalar
from employee_facade.errors import DataIntegrityError
from employee_facade.handlers import EmployeeHandler
from employee_facade.protocols import EmployeeStore, UpstreamClient, UpstreamResponse
from employee_facade.repositories import HttpUpstreamClient, InMemoryEmployeeCache
from employee_facade.services import EmployeeService

__all__ = [
    # Configuration
    "settings",
    "get_http_client",
    "configure_logging",
    # Protocols (interfaces)
    "UpstreamClient",
    "UpstreamResponse",
    "EmployeeStore",
    # Services (business logic)
    "EmployeeService",
    # Handlers (HTTP)
    "EmployeeHandler",
    # Repositories (data access)
    "HttpUpstreamClient",
    "InMemoryEmployeeCache",
    # Entities (domain models)
    "Employee",
    "Employees",
    "Scalar",
    "Names",
    "Failure",
    "FailureKind",
    "DataIntegrityError",
    # DTOs (API contracts)
    "CreateEmployeeRequest",
    "EmployeeItem",
]
