"""Read-only process and host introspection."""

import os
import platform
import socket
import sys
import time

import psutil

from src.operations.envelope import utc_timestamp

from .schemas import HealthResponse, MemoryInfo, SystemInfoResponse, User, UserListResponse


SERVER_NAME = "FastAPI"
_BYTES_PER_MB = 1024 * 1024

SAMPLE_USERS: tuple[User, ...] = (
    User(id=1, name="Alice Johnson", email="alice@example.com", role="Admin"),
    User(id=2, name="Bob Smith", email="bob@example.com", role="Developer"),
    User(id=3, name="Carol Williams", email="carol@example.com", role="Designer"),
    User(id=4, name="David Brown", email="david@example.com", role="Manager"),
)


def process_uptime() -> float:
    """Seconds elapsed since this process was created."""
    return max(0.0, time.time() - psutil.Process().create_time())


def _megabytes(value: int) -> str:
    return f"{round(value / _BYTES_PER_MB)} MB"


def get_health() -> HealthResponse:
    return HealthResponse(
        server=SERVER_NAME,
        timestamp=utc_timestamp(),
        uptime=round(process_uptime(), 3),
        version=platform.python_version(),
    )


def get_system_info() -> SystemInfoResponse:
    """Collect platform, memory and CPU details for the current host.

    Memory figures are rounded to whole megabytes and rendered as strings,
    ``usage`` being the resident set size of this process.
    """
    virtual_memory = psutil.virtual_memory()
    rss = psutil.Process().memory_info().rss

    return SystemInfoResponse(
        platform=sys.platform,
        arch=platform.machine(),
        python_version=platform.python_version(),
        memory=MemoryInfo(
            total=_megabytes(virtual_memory.total),
            free=_megabytes(virtual_memory.available),
            usage=_megabytes(rss),
        ),
        uptime=f"{round(process_uptime())} seconds",
        cpus=os.cpu_count() or 0,
        hostname=socket.gethostname(),
    )


def list_users() -> UserListResponse:
    return UserListResponse(users=list(SAMPLE_USERS), count=len(SAMPLE_USERS))
