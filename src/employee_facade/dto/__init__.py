"""Data Transfer Objects for API contracts.

These Pydantic models define the external contracts: the bodies the
upstream API returns and the requests/responses of our own HTTP API.

Internal domain logic should use entities from the entities package.
"""

from .requests import CreateEmployeeRequest
from .responses import CacheStatsResponse, EmployeeItem, HealthCheckResponse
from .upstream import (
    SUCCESS,
    UpstreamCreateBody,
    UpstreamCreatedEmployee,
    UpstreamEmployee,
    UpstreamEnvelope,
)

__all__ = [
    "CreateEmployeeRequest",
    "EmployeeItem",
    "CacheStatsResponse",
    "HealthCheckResponse",
    "SUCCESS",
    "UpstreamEmployee",
    "UpstreamEnvelope",
    "UpstreamCreatedEmployee",
    "UpstreamCreateBody",
]
