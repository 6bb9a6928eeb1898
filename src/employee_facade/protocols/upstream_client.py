"""Upstream client protocol.

Defines the interface for anything that can talk to the third-party
employee API. The service layer only depends on this protocol, so tests
and alternative transports can be plugged in without touching it.
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from employee_facade.entities import Failure


@dataclass(frozen=True)
class UpstreamResponse:
    """A decoded, non-error upstream reply.

    Attributes:
        status_code: HTTP status returned by the upstream (always < 400)
        body: Decoded JSON body, None when the reply had no content
    """

    status_code: int
    body: Any = None


@runtime_checkable
class UpstreamClient(Protocol):
    """Protocol for upstream employee API clients.

    Implementations never raise for upstream or transport problems. Error
    statuses (>= 400) come back as ``Failure(UPSTREAM_HTTP, ...)`` and
    network/decoding problems as ``Failure(TRANSPORT, ...)``.
    """

    async def list_employees(self) -> UpstreamResponse | Failure:
        """Fetch the full employee list.

        Returns:
            The decoded reply or a classified failure
        """
        ...

    async def get_employee(self, employee_id: str) -> UpstreamResponse | Failure:
        """Fetch one employee by id.

        Args:
            employee_id: The upstream identifier

        Returns:
            The decoded reply or a classified failure
        """
        ...

    async def create_employee(self, name: str, salary: str, age: str) -> UpstreamResponse | Failure:
        """Create an employee (form-encoded body).

        Args:
            name: Display name
            salary: Salary as a decimal string
            age: Age as a decimal string

        Returns:
            The decoded reply or a classified failure
        """
        ...

    async def delete_employee(self, employee_id: str) -> UpstreamResponse | Failure:
        """Delete an employee by id.

        Args:
            employee_id: The upstream identifier

        Returns:
            The decoded reply or a classified failure
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
