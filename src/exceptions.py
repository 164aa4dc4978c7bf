"""Custom exceptions shared across the Utility Operations API."""

from typing import Any


class UtilityAPIError(Exception):
    """Base exception for all service errors.

    Attributes:
        message: Human-readable error message.
        code: Stable machine-readable error code.
        status_code: HTTP status the boundary should answer with.
    """

    status_code: int = 500

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        """Render the JSON body returned to clients."""
        return {"error": self.code, "message": self.message}


class PayloadTooLargeError(UtilityAPIError):
    """Raised when a request body exceeds the configured size limit.

    Attributes:
        max_bytes: Maximum allowed size.
        size_bytes: Declared or observed size, when known.
    """

    status_code = 413

    def __init__(self, max_bytes: int, size_bytes: int | None = None):
        if size_bytes is None:
            message = f"Request body exceeds limit of {max_bytes} bytes"
        else:
            message = f"Payload size {size_bytes} bytes exceeds limit of {max_bytes} bytes"
        super().__init__(message=message, code="PAYLOAD_TOO_LARGE")
        self.max_bytes = max_bytes
        self.size_bytes = size_bytes
