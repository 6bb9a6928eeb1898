"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from employee_facade.config import configure_logging, settings
from employee_facade.handlers import EmployeeHandler
from employee_facade.repositories import HttpUpstreamClient, InMemoryEmployeeCache
from employee_facade.services import EmployeeService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> EmployeeHandler:
    """Dependency injection for EmployeeHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "employee_handler", None)
    if handler is None:
        raise RuntimeError("EmployeeHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Upstream client and cache (data access) - created explicitly
    2. Service (business logic) - stored in app.state.employee_service
    3. Handler (HTTP endpoints) - stored in app.state.employee_handler

    Cleanup:
        Closes the upstream HTTP client and removes everything from app.state
    """
    configure_logging()

    client = HttpUpstreamClient.create()
    cache = InMemoryEmployeeCache.create()
    employee_service = EmployeeService.create(client=client, cache=cache)

    app.state.employee_service = employee_service
    app.state.employee_handler = EmployeeHandler(employee_service=employee_service)

    logger.info("Employee facade started (upstream=%s)", settings.upstream_base_url)
    logger.info("Upstream timeout: %ss, cache key: %r", settings.upstream_timeout, cache.cache_key)

    try:
        yield
    finally:
        await employee_service.close()
        del app.state.employee_handler
        del app.state.employee_service
        logger.info("Employee facade shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[EmployeeHandler, Depends(get_handler)]