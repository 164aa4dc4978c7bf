"""Operations module - validation, dispatch and envelopes for utility operations."""

from .schemas import (
    Family,
    CalculateOperation,
    TextOperation,
    RandomType,
    FailureKind,
    Failure,
    CalculateArgs,
    TextArgs,
    RandomArgs,
    NumericResult,
    TextResult,
    StructuredResult,
    SequenceResult,
    OperationSuccess,
    CalculateEnvelope,
    TextEnvelope,
    RandomEnvelope,
    FailureEnvelope,
)
from .exceptions import OperationFailedError, MalformedBodyError
from .validator import validate
from .registry import REGISTRY, lookup
from .service import dispatch, calculate, process_text, generate_random
from .envelope import build_envelope, build_success_envelope, build_failure_envelope


__all__ = [
    # Schemas
    "Family",
    "CalculateOperation",
    "TextOperation",
    "RandomType",
    "FailureKind",
    "Failure",
    "CalculateArgs",
    "TextArgs",
    "RandomArgs",
    "NumericResult",
    "TextResult",
    "StructuredResult",
    "SequenceResult",
    "OperationSuccess",
    "CalculateEnvelope",
    "TextEnvelope",
    "RandomEnvelope",
    "FailureEnvelope",
    # Exceptions
    "OperationFailedError",
    "MalformedBodyError",
    # Validation and registry
    "validate",
    "REGISTRY",
    "lookup",
    # Service
    "dispatch",
    "calculate",
    "process_text",
    "generate_random",
    # Envelopes
    "build_envelope",
    "build_success_envelope",
    "build_failure_envelope",
]
