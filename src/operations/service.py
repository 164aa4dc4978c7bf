"""Dispatch layer: validate raw fields, run the registered computation."""

from typing import Any

import structlog

from .registry import lookup
from .schemas import Failure, FailureKind, Family, OperationSuccess
from .validator import validate


logger = structlog.get_logger("operations")

INTERNAL_ERROR_MESSAGE = "Internal error while executing operation"

OperationOutcome = OperationSuccess | Failure


def dispatch(family: Family, raw_fields: Any) -> OperationOutcome:
    """Run one operation end to end.

    This is the single entry point for every operation family. It:
    1. Validates the raw fields into a typed argument model
    2. Looks up the computation for the requested operation
    3. Runs the computation

    The first failure short-circuits the sequence. Unexpected exceptions are
    logged and converted to an ``internal_error`` failure, so this function
    never raises.

    Args:
        family: Operation family the request targets.
        raw_fields: Decoded request body.

    Returns:
        OperationSuccess with the validated args and result, or a Failure.
    """
    operation = None
    try:
        args = validate(family, raw_fields)
        if isinstance(args, Failure):
            return args

        operation = args.operation_key
        computation = lookup(family, operation)
        if computation is None:
            return Failure(
                kind=FailureKind.unknown_operation,
                message=f"Operation '{operation.value}' is not registered for {family.value}",
            )

        result = computation(args)
        if isinstance(result, Failure):
            return result
    except Exception:
        logger.exception(
            "operation_failed",
            family=family.value,
            operation=getattr(operation, "value", None),
        )
        return Failure(kind=FailureKind.internal_error, message=INTERNAL_ERROR_MESSAGE)

    logger.debug("operation_dispatched", family=family.value, operation=operation.value)
    return OperationSuccess(args=args, result=result)


def calculate(raw_fields: Any) -> OperationOutcome:
    """Arithmetic on ``num1``/``num2`` selected by ``operation``."""
    return dispatch(Family.calculate, raw_fields)


def process_text(raw_fields: Any) -> OperationOutcome:
    """Text transform of ``text`` selected by ``operation``."""
    return dispatch(Family.text_process, raw_fields)


def generate_random(raw_fields: Any) -> OperationOutcome:
    """``count`` random items of the requested ``type``."""
    return dispatch(Family.random_generate, raw_fields)
