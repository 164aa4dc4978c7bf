"""FastAPI router for the operation endpoints."""

from typing import Annotated, Any, Callable

from anyio.to_thread import run_sync
from fastapi import APIRouter, Depends

from src.dependencies import get_raw_fields

from .envelope import build_success_envelope
from .exceptions import OperationFailedError
from .schemas import CalculateEnvelope, Failure, FailureEnvelope, RandomEnvelope, TextEnvelope
from .service import OperationOutcome, calculate, generate_random, process_text


router = APIRouter(prefix="/api", tags=["operations"])

FAILURE_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": FailureEnvelope, "description": "Invalid input, unknown operation or division by zero"},
    500: {"model": FailureEnvelope, "description": "Unexpected failure inside an operation"},
}


async def _run(
    entry_point: Callable[[Any], OperationOutcome],
    raw_fields: Any,
) -> CalculateEnvelope | TextEnvelope | RandomEnvelope:
    """Dispatch in a worker thread and turn failures into exceptions."""
    outcome = await run_sync(entry_point, raw_fields)
    if isinstance(outcome, Failure):
        raise OperationFailedError(outcome)
    return build_success_envelope(outcome)


@router.post("/calculate", response_model=CalculateEnvelope, responses=FAILURE_RESPONSES)
async def calculate_endpoint(
    raw_fields: Annotated[Any, Depends(get_raw_fields)],
) -> CalculateEnvelope:
    """Apply ``operation`` (add, subtract, multiply, divide) to ``num1`` and ``num2``."""
    return await _run(calculate, raw_fields)


@router.post("/text/process", response_model=TextEnvelope, responses=FAILURE_RESPONSES)
async def process_text_endpoint(
    raw_fields: Annotated[Any, Depends(get_raw_fields)],
) -> TextEnvelope:
    """Transform ``text`` with ``operation``.

    Supported operations: uppercase, lowercase, reverse, capitalize and count.
    ``count`` returns character, word and line totals instead of a string.
    """
    return await _run(process_text, raw_fields)


@router.post("/random", response_model=RandomEnvelope, responses=FAILURE_RESPONSES)
async def generate_random_endpoint(
    raw_fields: Annotated[Any, Depends(get_raw_fields)],
) -> RandomEnvelope:
    """Generate ``count`` (default 10) random numbers, UUIDs or colors."""
    return await _run(generate_random, raw_fields)
