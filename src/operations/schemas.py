"""Pydantic schemas for operation arguments, results and response envelopes."""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Family(str, Enum):
    """Operation family an endpoint belongs to."""

    calculate = "calculate"
    text_process = "text_process"
    random_generate = "random_generate"


class CalculateOperation(str, Enum):
    """Supported arithmetic operations."""

    add = "add"
    subtract = "subtract"
    multiply = "multiply"
    divide = "divide"


class TextOperation(str, Enum):
    """Supported text transforms."""

    uppercase = "uppercase"
    lowercase = "lowercase"
    reverse = "reverse"
    capitalize = "capitalize"
    count = "count"


class RandomType(str, Enum):
    """Supported kinds of random data."""

    numbers = "numbers"
    uuid = "uuid"
    colors = "colors"


class FailureKind(str, Enum):
    """Why an operation could not produce a result."""

    invalid_input = "invalid_input"
    unknown_operation = "unknown_operation"
    division_by_zero = "division_by_zero"
    internal_error = "internal_error"

    @property
    def code(self) -> str:
        """Error code used in failure envelopes."""
        return self.value.upper()

    @property
    def status_code(self) -> int:
        """HTTP status the boundary maps this kind to."""
        if self is FailureKind.internal_error:
            return 500
        return 400


class Failure(BaseModel):
    """A structured, non-exceptional operation failure.

    Attributes:
        kind: Failure category.
        message: Human-readable description, safe to show to clients.
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str


# Validated arguments

class ArgsModel(BaseModel):
    """Base for validated argument bundles; immutable once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class CalculateArgs(ArgsModel):
    family: Literal[Family.calculate] = Family.calculate
    operation: CalculateOperation
    a: float
    b: float

    @property
    def operation_key(self) -> CalculateOperation:
        return self.operation


class TextArgs(ArgsModel):
    family: Literal[Family.text_process] = Family.text_process
    operation: TextOperation
    text: str = Field(..., min_length=1)

    @property
    def operation_key(self) -> TextOperation:
        return self.operation


class RandomArgs(ArgsModel):
    family: Literal[Family.random_generate] = Family.random_generate
    type: RandomType
    count: int = Field(default=10, ge=0)

    @property
    def operation_key(self) -> RandomType:
        return self.type


ValidatedArgs = Annotated[
    CalculateArgs | TextArgs | RandomArgs,
    Field(discriminator="family"),
]


# Operation results

class ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class NumericResult(ResultModel):
    kind: Literal["numeric"] = "numeric"
    value: float


class TextResult(ResultModel):
    kind: Literal["text"] = "text"
    value: str


class StructuredResult(ResultModel):
    kind: Literal["structured"] = "structured"
    value: dict[str, Any]


class SequenceResult(ResultModel):
    kind: Literal["sequence"] = "sequence"
    value: list[int | str]


OperationResult = Annotated[
    NumericResult | TextResult | StructuredResult | SequenceResult,
    Field(discriminator="kind"),
]


class OperationSuccess(BaseModel):
    """Validated input paired with the result it produced."""

    model_config = ConfigDict(frozen=True)

    args: ValidatedArgs
    result: OperationResult


# Response envelopes

class CalculateEnvelope(BaseModel):
    """Success envelope for ``/api/calculate``."""

    family: Family = Family.calculate
    operation: CalculateOperation
    num1: float
    num2: float
    result: float
    timestamp: str = Field(..., description="ISO-8601 UTC time the response was built")


class TextEnvelope(BaseModel):
    """Success envelope for ``/api/text/process``."""

    family: Family = Family.text_process
    operation: TextOperation
    original: str
    result: str | dict[str, int]
    timestamp: str


class RandomEnvelope(BaseModel):
    """Success envelope for ``/api/random``."""

    family: Family = Family.random_generate
    type: RandomType
    count: int
    data: list[int | str]
    timestamp: str


class FailureEnvelope(BaseModel):
    """Envelope returned for every failed operation."""

    error: str = Field(..., description="Failure code, e.g. INVALID_INPUT")
    message: str
    timestamp: str
