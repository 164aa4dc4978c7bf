"""System module - health, host introspection and echo endpoints."""

from .schemas import HealthResponse, SystemInfoResponse, UserListResponse, EchoResponse
from .service import get_health, get_system_info, list_users


__all__ = [
    "HealthResponse",
    "SystemInfoResponse",
    "UserListResponse",
    "EchoResponse",
    "get_health",
    "get_system_info",
    "list_users",
]
