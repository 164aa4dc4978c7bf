"""Exceptions raised at the HTTP boundary for failed operations."""

from typing import Any

from src.exceptions import UtilityAPIError

from .envelope import build_failure_envelope
from .schemas import Failure, FailureKind


class OperationFailedError(UtilityAPIError):
    """Raised by routers when dispatch returned a Failure.

    Attributes:
        failure: The failure produced by the operation core.
    """

    def __init__(self, failure: Failure):
        super().__init__(message=failure.message, code=failure.kind.code)
        self.failure = failure
        self.status_code = failure.kind.status_code

    def to_payload(self) -> dict[str, Any]:
        return build_failure_envelope(self.failure).model_dump(mode="json")


class MalformedBodyError(OperationFailedError):
    """Raised when a request body cannot be decoded."""

    def __init__(self, reason: str = "Request body is not valid JSON"):
        super().__init__(Failure(kind=FailureKind.invalid_input, message=reason))
