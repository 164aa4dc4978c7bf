"""Registry of pure computations keyed by family and operation name.

The registry is built once at import time and exposed read-only. Adding an
operation means adding an enum member and one entry in ``REGISTRY``; the
import-time check below fails loudly if the two drift apart.
"""

import random
import uuid
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable

from .schemas import (
    CalculateArgs,
    CalculateOperation,
    Failure,
    FailureKind,
    Family,
    NumericResult,
    RandomArgs,
    RandomType,
    SequenceResult,
    StructuredResult,
    TextArgs,
    TextOperation,
    TextResult,
)


Computation = Callable[[Any], Any]

# OS entropy source: no shared seed, safe to call from concurrent threads.
_rng = random.SystemRandom()


# Calculate

def add(args: CalculateArgs) -> NumericResult:
    return NumericResult(value=args.a + args.b)


def subtract(args: CalculateArgs) -> NumericResult:
    return NumericResult(value=args.a - args.b)


def multiply(args: CalculateArgs) -> NumericResult:
    return NumericResult(value=args.a * args.b)


def divide(args: CalculateArgs) -> NumericResult | Failure:
    """Divide ``a`` by ``b``; only a literal zero divisor is rejected."""
    if args.b == 0:
        return Failure(kind=FailureKind.division_by_zero, message="Cannot divide by zero")
    return NumericResult(value=args.a / args.b)


# Text

def uppercase(args: TextArgs) -> TextResult:
    return TextResult(value=args.text.upper())


def lowercase(args: TextArgs) -> TextResult:
    return TextResult(value=args.text.lower())


def reverse(args: TextArgs) -> TextResult:
    # str slicing works on code points, so multi-byte characters stay intact
    return TextResult(value=args.text[::-1])


def capitalize(args: TextArgs) -> TextResult:
    """Title-case each space-separated word.

    Empty tokens are dropped, so runs of spaces collapse to a single space.
    """
    words = [word for word in args.text.split(" ") if word]
    return TextResult(value=" ".join(word[:1].upper() + word[1:].lower() for word in words))


def count(args: TextArgs) -> StructuredResult:
    text = args.text
    return StructuredResult(
        value={
            "characters": len(text),
            "words": len(text.split()),
            "lines": text.count("\n") + 1,
        }
    )


# Random

def random_numbers(args: RandomArgs) -> SequenceResult:
    return SequenceResult(value=[_rng.randint(1, 100) for _ in range(args.count)])


def random_uuids(args: RandomArgs) -> SequenceResult:
    return SequenceResult(value=[str(uuid.uuid4()) for _ in range(args.count)])


def random_colors(args: RandomArgs) -> SequenceResult:
    return SequenceResult(value=[f"#{_rng.randrange(0x1000000):06x}" for _ in range(args.count)])


REGISTRY: Mapping[tuple[Family, Enum], Computation] = MappingProxyType({
    (Family.calculate, CalculateOperation.add): add,
    (Family.calculate, CalculateOperation.subtract): subtract,
    (Family.calculate, CalculateOperation.multiply): multiply,
    (Family.calculate, CalculateOperation.divide): divide,
    (Family.text_process, TextOperation.uppercase): uppercase,
    (Family.text_process, TextOperation.lowercase): lowercase,
    (Family.text_process, TextOperation.reverse): reverse,
    (Family.text_process, TextOperation.capitalize): capitalize,
    (Family.text_process, TextOperation.count): count,
    (Family.random_generate, RandomType.numbers): random_numbers,
    (Family.random_generate, RandomType.uuid): random_uuids,
    (Family.random_generate, RandomType.colors): random_colors,
})

FAMILY_OPERATIONS: Mapping[Family, type[Enum]] = MappingProxyType({
    Family.calculate: CalculateOperation,
    Family.text_process: TextOperation,
    Family.random_generate: RandomType,
})


def missing_operations() -> list[tuple[Family, Enum]]:
    """List declared (family, operation) pairs with no registered computation."""
    return [
        (family, operation)
        for family, operations in FAMILY_OPERATIONS.items()
        for operation in operations
        if (family, operation) not in REGISTRY
    ]


def lookup(family: Family, operation: Enum) -> Computation | None:
    """Return the computation registered for ``(family, operation)``, if any."""
    return REGISTRY.get((family, operation))


_missing = missing_operations()
if _missing:
    raise RuntimeError(f"Operations without a registered computation: {_missing}")
