"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Upstream API / cache)
"""

from .employee_handler import EmployeeHandler

__all__ = [
    "EmployeeHandler",
]
