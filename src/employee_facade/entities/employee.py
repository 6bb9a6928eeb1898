"""Employee domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity for one employee record.

    Salary and age are kept exactly as the upstream sent them (decimal
    strings). They are only parsed when a numeric view is computed, so a
    malformed value is reported instead of being coerced.

    Attributes:
        id: Identifier assigned by the upstream API
        name: Display name
        salary: String-encoded non-negative integer
        age: String-encoded integer
        profile_image: Image URL, empty when the upstream has none
    """

    id: str | None = None
    name: str | None = None
    salary: str | None = None
    age: str | None = None
    profile_image: str = ""
