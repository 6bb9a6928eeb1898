"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the upstream transport or the cache backend
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from employee_facade.protocols import EmployeeStore, UpstreamClient

    client: UpstreamClient = HttpUpstreamClient.create()
    cache: EmployeeStore = InMemoryEmployeeCache.create()
    ```
"""

from .employee_store import EmployeeStore
from .upstream_client import UpstreamClient, UpstreamResponse

__all__ = [
    "EmployeeStore",
    "UpstreamClient",
    "UpstreamResponse",
]
