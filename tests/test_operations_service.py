"""Unit tests for the operation dispatcher."""

import re
from unittest.mock import patch

import pytest

from src.operations.schemas import (
    CalculateArgs,
    Failure,
    FailureKind,
    Family,
    OperationSuccess,
    RandomArgs,
    TextArgs,
)
from src.operations.service import (
    INTERNAL_ERROR_MESSAGE,
    calculate,
    dispatch,
    generate_random,
    process_text,
)


UUID4_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


class TestCalculate:
    """Tests for the calculate entry point."""

    def test_add(self):
        """Test add(2, 3) is exactly 5."""
        outcome = calculate({"operation": "add", "num1": 2, "num2": 3})

        assert isinstance(outcome, OperationSuccess)
        assert isinstance(outcome.args, CalculateArgs)
        assert outcome.result.value == 5

    def test_multiply(self):
        outcome = calculate({"operation": "multiply", "num1": "4", "num2": "5"})

        assert outcome.result.value == 20

    @pytest.mark.parametrize("num1", [0, 7, -3.2, "99"])
    def test_divide_by_zero(self, num1):
        """Test dividing anything by zero fails with division_by_zero."""
        outcome = calculate({"operation": "divide", "num1": num1, "num2": 0})

        assert isinstance(outcome, Failure)
        assert outcome.kind is FailureKind.division_by_zero

    def test_unknown_operation(self):
        """Test an unsupported operation never falls back silently."""
        outcome = calculate({"operation": "modulo", "num1": 5, "num2": 3})

        assert isinstance(outcome, Failure)
        assert outcome.kind is FailureKind.unknown_operation

    def test_non_numeric_input(self):
        outcome = calculate({"operation": "add", "num1": "abc", "num2": 1})

        assert outcome.kind is FailureKind.invalid_input


class TestProcessText:
    """Tests for the process_text entry point."""

    def test_capitalize(self):
        outcome = process_text({"operation": "capitalize", "text": "hello world"})

        assert isinstance(outcome.args, TextArgs)
        assert outcome.result.value == "Hello World"

    def test_count(self):
        outcome = process_text({"operation": "count", "text": "a b\nc"})

        assert outcome.result.value == {"characters": 5, "words": 3, "lines": 2}

    def test_reverse_round_trip(self):
        once = process_text({"operation": "reverse", "text": "Grüße 🌍"}).result.value
        twice = process_text({"operation": "reverse", "text": once}).result.value

        assert twice == "Grüße 🌍"

    def test_unknown_operation(self):
        outcome = process_text({"operation": "modulo", "text": "x"})

        assert outcome.kind is FailureKind.unknown_operation

    def test_missing_text(self):
        outcome = process_text({"operation": "uppercase"})

        assert outcome.kind is FailureKind.invalid_input


class TestGenerateRandom:
    """Tests for the generate_random entry point."""

    def test_numbers(self):
        outcome = generate_random({"type": "numbers", "count": 5})

        assert isinstance(outcome.args, RandomArgs)
        assert len(outcome.result.value) == 5
        assert all(1 <= n <= 100 for n in outcome.result.value)

    def test_uuid(self):
        outcome = generate_random({"type": "uuid", "count": 1})

        assert UUID4_RE.match(outcome.result.value[0])

    def test_colors(self):
        outcome = generate_random({"type": "colors", "count": 3})

        assert len(outcome.result.value) == 3
        assert all(re.fullmatch(r"#[0-9a-fA-F]{6}", c) for c in outcome.result.value)

    def test_default_count(self):
        outcome = generate_random({"type": "numbers"})

        assert len(outcome.result.value) == 10

    def test_negative_count(self):
        outcome = generate_random({"type": "numbers", "count": -1})

        assert outcome.kind is FailureKind.invalid_input

    def test_unknown_type(self):
        outcome = generate_random({"type": "modulo"})

        assert outcome.kind is FailureKind.unknown_operation


class TestDispatch:
    """Tests for dispatch error containment."""

    def test_computation_exception_becomes_internal_error(self):
        """Test unexpected exceptions are contained and not leaked."""
        def boom(args):
            raise RuntimeError("secret stack detail")

        with patch("src.operations.service.lookup", return_value=boom):
            outcome = dispatch(Family.calculate, {"operation": "add", "num1": 1, "num2": 2})

        assert isinstance(outcome, Failure)
        assert outcome.kind is FailureKind.internal_error
        assert outcome.message == INTERNAL_ERROR_MESSAGE
        assert "secret" not in outcome.message

    def test_validator_exception_becomes_internal_error(self):
        with patch("src.operations.service.validate", side_effect=ValueError("bad")):
            outcome = dispatch(Family.text_process, {"operation": "reverse", "text": "x"})

        assert outcome.kind is FailureKind.internal_error

    def test_unregistered_operation(self):
        """Test a missing registry entry is reported as unknown operation."""
        with patch("src.operations.service.lookup", return_value=None):
            outcome = dispatch(Family.calculate, {"operation": "add", "num1": 1, "num2": 2})

        assert outcome.kind is FailureKind.unknown_operation

    def test_non_object_body(self):
        outcome = dispatch(Family.random_generate, ["numbers"])

        assert outcome.kind is FailureKind.invalid_input
