"""Repository layer for data access.

This layer hides the external dependencies (the upstream HTTP API and the
process-local cache) behind protocol-based interfaces. The repositories are
protocol-based (structural typing), not inheritance-based.
"""

from employee_facade.protocols import EmployeeStore, UpstreamClient

from .http_upstream_client import HttpUpstreamClient
from .memory_employee_cache import InMemoryEmployeeCache

__all__ = [
    "EmployeeStore",
    "UpstreamClient",
    "HttpUpstreamClient",
    "InMemoryEmployeeCache",
]
