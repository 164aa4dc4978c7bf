"""Validation of raw request fields into typed operation arguments.

Every function here returns either a validated argument model or a
``Failure``; none of them raise for bad input and none mutate their input.
"""

import math
import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, TypeVar

from src.config import get_settings

from .schemas import (
    CalculateArgs,
    CalculateOperation,
    Failure,
    FailureKind,
    Family,
    RandomArgs,
    RandomType,
    TextArgs,
    TextOperation,
)


DECIMAL_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")
COUNT_RE = re.compile(r"^\s*\+?\d+\s*$")

E = TypeVar("E", bound=Enum)


def parse_number(value: Any) -> float | None:
    """Parse a JSON number or decimal string into a finite float.

    Args:
        value: Raw field value.

    Returns:
        The float value, or None when the value is not a finite decimal.
    """
    # bool is an int subclass; true/false are not numbers here
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str) and DECIMAL_RE.match(value):
            number = float(value)
        else:
            return None
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def parse_count(value: Any) -> int | None:
    """Coerce a raw count into a non-negative integer.

    Accepts ints, integral floats and digit strings.

    Returns:
        The integer count, or None when it cannot be coerced.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        count = value
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        count = int(value)
    elif isinstance(value, str) and COUNT_RE.match(value):
        count = int(value)
    else:
        return None
    return count if count >= 0 else None


def parse_enum(enum_cls: type[E], value: Any) -> E | None:
    """Look up ``value`` among the members of ``enum_cls``."""
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _invalid(message: str) -> Failure:
    return Failure(kind=FailureKind.invalid_input, message=message)


def _unknown(label: str, value: Any, enum_cls: type[Enum]) -> Failure:
    allowed = ", ".join(member.value for member in enum_cls)
    return Failure(
        kind=FailureKind.unknown_operation,
        message=f"Invalid {label} {value!r}; expected one of: {allowed}",
    )


def validate_calculate(raw_fields: Mapping[str, Any]) -> CalculateArgs | Failure:
    a = parse_number(raw_fields.get("num1"))
    b = parse_number(raw_fields.get("num2"))
    if a is None or b is None:
        return _invalid("Invalid numbers provided: num1 and num2 must be finite decimal numbers")

    operation = parse_enum(CalculateOperation, raw_fields.get("operation"))
    if operation is None:
        return _unknown("operation", raw_fields.get("operation"), CalculateOperation)

    return CalculateArgs(operation=operation, a=a, b=b)


def validate_text(raw_fields: Mapping[str, Any]) -> TextArgs | Failure:
    text = raw_fields.get("text")
    if not isinstance(text, str) or not text:
        return _invalid("Text is required and must be a non-empty string")

    operation = parse_enum(TextOperation, raw_fields.get("operation"))
    if operation is None:
        return _unknown("operation", raw_fields.get("operation"), TextOperation)

    return TextArgs(operation=operation, text=text)


def validate_random(raw_fields: Mapping[str, Any]) -> RandomArgs | Failure:
    settings = get_settings()

    random_type = parse_enum(RandomType, raw_fields.get("type"))
    if random_type is None:
        return _unknown("type", raw_fields.get("type"), RandomType)

    raw_count = raw_fields.get("count")
    if raw_count is None:
        count = settings.RANDOM_DEFAULT_COUNT
    else:
        count = parse_count(raw_count)
        if count is None:
            return _invalid("count must be a non-negative integer")
        if count > settings.MAX_RANDOM_COUNT:
            return _invalid(f"count must not exceed {settings.MAX_RANDOM_COUNT}")

    return RandomArgs(type=random_type, count=count)


VALIDATORS: Mapping[Family, Callable[[Mapping[str, Any]], Any]] = MappingProxyType({
    Family.calculate: validate_calculate,
    Family.text_process: validate_text,
    Family.random_generate: validate_random,
})


def validate(family: Family, raw_fields: Any) -> CalculateArgs | TextArgs | RandomArgs | Failure:
    """Validate raw request fields for an operation family.

    Args:
        family: Operation family the request targets.
        raw_fields: Decoded request body.

    Returns:
        The validated argument model, or a Failure describing the rejection.
    """
    if not isinstance(raw_fields, Mapping):
        return _invalid("Request body must be a JSON object")
    return VALIDATORS[family](raw_fields)
