"""Build the uniform JSON envelopes returned by operation endpoints."""

from datetime import datetime, timezone

from .schemas import (
    CalculateArgs,
    CalculateEnvelope,
    Failure,
    FailureEnvelope,
    OperationSuccess,
    RandomArgs,
    RandomEnvelope,
    TextArgs,
    TextEnvelope,
)


def utc_timestamp() -> str:
    """Current wall-clock time as ISO-8601 UTC with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_success_envelope(
    success: OperationSuccess,
) -> CalculateEnvelope | TextEnvelope | RandomEnvelope:
    """Echo the validated inputs next to the result.

    Args:
        success: Validated args and the result they produced.

    Returns:
        The family-specific envelope.
    """
    args = success.args
    value = success.result.value
    timestamp = utc_timestamp()

    if isinstance(args, CalculateArgs):
        return CalculateEnvelope(
            operation=args.operation,
            num1=args.a,
            num2=args.b,
            result=value,
            timestamp=timestamp,
        )
    if isinstance(args, TextArgs):
        return TextEnvelope(
            operation=args.operation,
            original=args.text,
            result=value,
            timestamp=timestamp,
        )
    if isinstance(args, RandomArgs):
        return RandomEnvelope(
            type=args.type,
            count=len(value),
            data=value,
            timestamp=timestamp,
        )
    raise TypeError(f"Unsupported argument model: {type(args).__name__}")


def build_failure_envelope(failure: Failure) -> FailureEnvelope:
    return FailureEnvelope(
        error=failure.kind.code,
        message=failure.message,
        timestamp=utc_timestamp(),
    )


def build_envelope(
    outcome: OperationSuccess | Failure,
) -> CalculateEnvelope | TextEnvelope | RandomEnvelope | FailureEnvelope:
    """Wrap any dispatch outcome, success or failure."""
    if isinstance(outcome, Failure):
        return build_failure_envelope(outcome)
    return build_success_envelope(outcome)
