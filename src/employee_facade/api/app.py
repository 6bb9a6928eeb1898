from typing import Any

from fastapi import APIRouter, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from employee_facade.api.dependencies import HandlerDep, lifespan
from employee_facade.config import settings
from employee_facade.dto import (
    CacheStatsResponse,
    CreateEmployeeRequest,
    EmployeeItem,
    HealthCheckResponse,
)

API_TITLE = "Employee Facade API"
API_VERSION = "0.1.0"
API_DESCRIPTION = "Cached facade over a third-party employee API"

router = APIRouter(prefix="/api/v1/employee", tags=["employees"])


@router.get("", response_model=list[EmployeeItem])
async def list_employees(handler: HandlerDep) -> list[EmployeeItem]:
    """Get a list of all employees (served from the cache when possible)."""
    return await handler.list_employees()


@router.get("/search/{search_string}", response_model=list[EmployeeItem])
async def search_employees(search_string: str, handler: HandlerDep) -> list[EmployeeItem]:
    """Search for employees whose name contains the search string."""
    return await handler.search(search_string)


@router.get("/highestSalary", response_model=int)
async def highest_salary(handler: HandlerDep) -> int:
    """Get the highest salary among all employees."""
    return await handler.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def top_ten_names(handler: HandlerDep) -> list[str]:
    """Get the names of the ten highest earning employees."""
    return await handler.top_ten_names()


@router.get("/{employee_id}", response_model=EmployeeItem)
async def get_employee(employee_id: str, handler: HandlerDep) -> EmployeeItem:
    """Get an employee by ID (always fetched live from the upstream)."""
    return await handler.get_employee(employee_id)


@router.post("", response_model=EmployeeItem, status_code=status.HTTP_201_CREATED)
async def create_employee(request: CreateEmployeeRequest, handler: HandlerDep) -> EmployeeItem:
    """Create a new employee."""
    return await handler.create_employee(request)


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee(employee_id: str, handler: HandlerDep) -> str:
    """Delete an employee by ID and return the confirmation message."""
    return await handler.delete_employee(employee_id)


app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "endpoints": {
            "employees": "/api/v1/employee",
            "stats": "/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/stats", response_model=CacheStatsResponse)
async def get_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get cache statistics."""
    return await handler.get_stats()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "employee_facade.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
