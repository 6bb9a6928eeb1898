"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .employee import Employee
from .result import Employees, Failure, FailureKind, Names, Result, Scalar

__all__ = [
    "Employee",
    "Employees",
    "Failure",
    "FailureKind",
    "Names",
    "Result",
    "Scalar",
]
