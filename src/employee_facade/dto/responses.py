"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from employee_facade.entities import Employee


class EmployeeItem(BaseModel):
    """Employee as exposed over HTTP (same field names as the upstream)."""

    id: str | None = Field(None, description="Identifier assigned by the upstream")
    employee_name: str | None = Field(None, description="Display name")
    employee_salary: str | None = Field(None, description="Salary as a decimal string")
    employee_age: str | None = Field(None, description="Age as a decimal string")
    profile_image: str = Field("", description="Profile image URL, empty if unknown")

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeItem":
        return cls(
            id=employee.id,
            employee_name=employee.name,
            employee_salary=employee.salary,
            employee_age=employee.age,
            profile_image=employee.profile_image,
        )


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    cache_key: str = Field(..., description="Key of the single cache slot")
    populated: bool = Field(..., description="Whether an employee list is cached")
    cached_employees: int = Field(..., description="Number of cached employees", ge=0)
    hits: int = Field(..., description="Cache reads that found a list", ge=0)
    misses: int = Field(..., description="Cache reads that found nothing", ge=0)
    writes: int = Field(..., description="Times the list was stored", ge=0)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy'")
    cache_populated: bool = Field(..., description="Whether the employee list is cached")
    upstream_base_url: str = Field(..., description="Upstream API the facade proxies")
