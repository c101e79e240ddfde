"""Numeric tower: signed 64-bit integers and IEEE floats.

Python's ``int`` and ``float`` carry the Integer/Float tag directly. Integers
are kept inside the i64 range; a result outside it is an overflow, never a
silent switch to a bignum.
"""

from __future__ import annotations

import math
from typing import Iterable, Union

from minischeme.errors import SchemeOverflowError, SchemeTypeError

Number = Union[int, float]

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def is_number(value: object) -> bool:
    # bool is an int subclass but never a Scheme number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def in_i64_range(value: int) -> bool:
    return I64_MIN <= value <= I64_MAX


def check_i64(value: int, op: str) -> int:
    if not in_i64_range(value):
        raise SchemeOverflowError(f"integer overflow in {op}")
    return value


def check_numbers(args: Iterable[object]) -> list[Number]:
    """Return args as a list, raising SchemeTypeError unless every one is a Number."""
    numbers = list(args)
    if not all(is_number(x) for x in numbers):
        raise SchemeTypeError("wrong argument datatype")
    return numbers


def all_integers(numbers: Iterable[Number]) -> bool:
    return all(is_integer(x) for x in numbers)


def divide(a: float, b: float) -> float:
    """IEEE division: a zero divisor yields an infinity or nan."""
    if b == 0.0:
        if math.isnan(a) or a == 0.0:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b
