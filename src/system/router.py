"""FastAPI router for health, introspection and echo endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from src.dependencies import get_raw_fields
from src.operations.envelope import utc_timestamp

from .schemas import EchoResponse, HealthResponse, SystemInfoResponse, UserListResponse
from .service import get_health, get_system_info, list_users


router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report liveness, uptime and runtime version."""
    return get_health()


@router.get("/users", response_model=UserListResponse)
async def users() -> UserListResponse:
    return list_users()


@router.get("/system", response_model=SystemInfoResponse)
async def system_info() -> SystemInfoResponse:
    """Describe the host: platform, memory, CPU count and hostname."""
    return get_system_info()


@router.post("/echo", response_model=EchoResponse)
async def echo(
    request: Request,
    received: Annotated[Any, Depends(get_raw_fields)],
) -> EchoResponse:
    """Reflect the decoded body, headers and method back to the caller.

    Useful for checking what a client actually sends.
    """
    return EchoResponse(
        received=received,
        headers=dict(request.headers),
        method=request.method,
        timestamp=utc_timestamp(),
    )
