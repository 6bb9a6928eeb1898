"""Result variants returned by the service layer.

Each operation returns exactly one of these:

- ``Employees``: a list of employee records with an HTTP-style status
- ``Scalar``: a single integer (the highest salary)
- ``Names``: an ordered list of employee names
- ``Failure``: an explicit, classified error
"""

from dataclasses import dataclass
from enum import Enum

from .employee import Employee


class FailureKind(str, Enum):
    """Classification of a failed operation."""

    UPSTREAM_HTTP = "upstream_http"  # upstream answered with an error status
    UPSTREAM_SHAPE = "upstream_shape"  # 2xx body broke the expected contract
    TRANSPORT = "transport"  # network, timeout or undecodable body
    DATA_INTEGRITY = "data_integrity"  # salary/age failed numeric parsing
    NO_EMPLOYEES = "no_employees"  # the employee list itself is empty
    NO_MATCH = "no_match"  # list is populated but nothing matched


@dataclass(frozen=True)
class Employees:
    """Canonical envelope for upstream-facing operations."""

    status_code: int
    employees: tuple[Employee, ...] = ()
    message: str | None = None


@dataclass(frozen=True)
class Scalar:
    """A single integer result."""

    value: int

    @property
    def status_code(self) -> int:
        return 200


@dataclass(frozen=True)
class Names:
    """An ordered list of employee names."""

    names: tuple[str, ...]

    @property
    def status_code(self) -> int:
        return 200


@dataclass(frozen=True)
class Failure:
    """A classified failure.

    Attributes:
        kind: What went wrong
        status_code: Status to surface to the caller
        message: Short human-readable message, never exception text
    """

    kind: FailureKind
    status_code: int
    message: str


Result = Employees | Scalar | Names | Failure
