"""In-memory implementation of EmployeeStore.

Holds a single entry (the full employee list) for the lifetime of the
process. Reads and writes are guarded by a lock; concurrent writers are
last-write-wins.
"""

import logging
import threading

from employee_facade.config import settings
from employee_facade.entities import Employee

logger = logging.getLogger(__name__)


class InMemoryEmployeeCache:
    """Process-local, single-key employee cache.

    This class satisfies the EmployeeStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, cache_key: str | None = None) -> None:
        """Initialize the cache.

        Args:
            cache_key: Name of the single slot. Defaults to settings.cache_key.
        """
        self._cache_key = cache_key or settings.cache_key
        self._entries: dict[str, tuple[Employee, ...]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._writes = 0

    @classmethod
    def create(cls, cache_key: str | None = None) -> "InMemoryEmployeeCache":
        """Factory method to create InMemoryEmployeeCache with defaults."""
        return cls(cache_key=cache_key)

    def get(self) -> tuple[Employee, ...] | None:
        """Return the cached list, or None on a miss."""
        with self._lock:
            employees = self._entries.get(self._cache_key)
            if employees is None:
                self._misses += 1
            else:
                self._hits += 1
            return employees

    def put(self, employees: tuple[Employee, ...]) -> None:
        """Overwrite the cached list."""
        snapshot = tuple(employees)
        with self._lock:
            self._entries[self._cache_key] = snapshot
            self._writes += 1
        logger.info("Cached %d employees under key %r", len(snapshot), self._cache_key)

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with stats
        """
        with self._lock:
            employees = self._entries.get(self._cache_key)
            return {
                "cache_key": self._cache_key,
                "populated": employees is not None,
                "cached_employees": len(employees) if employees is not None else 0,
                "hits": self._hits,
                "misses": self._misses,
                "writes": self._writes,
            }

    @property
    def cache_key(self) -> str:
        return self._cache_key
