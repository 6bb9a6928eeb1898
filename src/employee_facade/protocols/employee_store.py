"""Employee cache protocol.

Defines the interface for the store holding the last successfully fetched
employee list. There is exactly one entry; no TTL and no partial
invalidation.
"""

from typing import Protocol, runtime_checkable

from employee_facade.entities import Employee


@runtime_checkable
class EmployeeStore(Protocol):
    """Protocol for the single-entry employee cache.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.
    """

    def get(self) -> tuple[Employee, ...] | None:
        """Return the cached employee list.

        Returns:
            The cached tuple, or None on a cache miss
        """
        ...

    def put(self, employees: tuple[Employee, ...]) -> None:
        """Store (overwrite) the employee list.

        Args:
            employees: The full list from a successful fetch
        """
        ...

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
