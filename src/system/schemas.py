"""Pydantic schemas for the introspection endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """API response for ``/api/health``.

    Attributes:
        status: Always "healthy" while the process can answer.
        server: Server implementation name.
        timestamp: ISO-8601 UTC response time.
        uptime: Seconds since the process started.
        version: Python version serving the request.
    """

    status: str = Field(default="healthy", description="Service health")
    server: str = Field(..., description="Server implementation")
    timestamp: str = Field(..., description="Response time")
    uptime: float = Field(..., description="Process uptime in seconds")
    version: str = Field(..., description="Python version")


class MemoryInfo(BaseModel):
    total: str
    free: str
    usage: str


class SystemInfoResponse(BaseModel):
    """API response for ``/api/system``."""

    platform: str
    arch: str
    python_version: str
    memory: MemoryInfo
    uptime: str
    cpus: int
    hostname: str


class User(BaseModel):
    id: int
    name: str
    email: str
    role: str


class UserListResponse(BaseModel):
    """API response for ``/api/users``.

    Attributes:
        users: Sample user records.
        count: Number of users returned.
    """

    users: list[User] = Field(default_factory=list, description="List of users")
    count: int = Field(..., description="Total number of users")


class EchoResponse(BaseModel):
    """Reflection of the incoming request."""

    received: Any = Field(default=None, description="Decoded request body")
    headers: dict[str, str] = Field(default_factory=dict)
    method: str
    timestamp: str
