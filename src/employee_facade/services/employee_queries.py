"""Read-only views over an employee snapshot.

Pure functions, no I/O. Salary and age are validated before any numeric
view is computed; a malformed value raises DataIntegrityError instead of
being treated as zero.
"""

import re
from collections.abc import Sequence

from employee_facade.entities import Employee
from employee_facade.errors import DataIntegrityError

DEFAULT_TOP_N = 10

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"-?[0-9]+")


def filter_by_name(employees: Sequence[Employee], term: str) -> list[Employee]:
    """Employees whose name contains ``term``, ignoring case, in input order."""
    needle = term.casefold()
    return [e for e in employees if needle in (e.name or "").casefold()]


def _parse_int(employee: Employee, field: str, pattern: re.Pattern[str]) -> int:
    value = getattr(employee, field)
    if value is None or not pattern.fullmatch(value):
        raise DataIntegrityError(employee.id, field, value)
    return int(value)


def parse_salaries(employees: Sequence[Employee]) -> list[int]:
    """Validate salary and age of every employee.

    Returns:
        Parsed salaries, in input order

    Raises:
        DataIntegrityError: On the first salary or age that is not a base-10 integer
    """
    salaries = []
    for employee in employees:
        _parse_int(employee, "age", _SIGNED)
        salaries.append(_parse_int(employee, "salary", _UNSIGNED))
    return salaries


def top_n_by_salary(employees: Sequence[Employee], n: int = DEFAULT_TOP_N) -> list[str]:
    """Names of the ``n`` best-paid employees, highest salary first.

    Equal salaries keep their input order.
    """
    if n < 0:
        raise ValueError("n must not be negative")

    salaries = parse_salaries(employees)
    ranked = sorted(zip(salaries, employees), key=lambda pair: pair[0], reverse=True)
    return [employee.name or "" for _, employee in ranked[:n]]


def max_salary(employees: Sequence[Employee]) -> int | None:
    """Highest salary, or None when there are no employees."""
    if not employees:
        return None
    return max(parse_salaries(employees))
