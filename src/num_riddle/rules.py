from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import math
from typing import FrozenSet, Tuple, Union

from .digits import text_digits


class InvariantViolation(RuntimeError):
    """A precondition of condition generation was broken (secret out of range)."""


class Kind(Enum):
    LARGER_THAN = "larger_than"
    SMALLER_THAN = "smaller_than"
    CONTAINS_DIGIT = "contains_digit"
    SUM_OF_DIGITS = "sum_of_digits"
    HAS_FACTOR = "has_factor"
    HAS_MULTIPLE = "has_multiple"
    IS_SQUARE = "is_square"
    IS_CUBE = "is_cube"
    IS_PALINDROME = "is_palindrome"
    DOESNT_CONTAIN = "doesnt_contain"
    CONTAINS_DIGIT_ALLITERATION = "contains_digit_alliteration"


BOOL_KINDS = frozenset({
    Kind.IS_SQUARE,
    Kind.IS_CUBE,
    Kind.IS_PALINDROME,
    Kind.CONTAINS_DIGIT_ALLITERATION,
})

Payload = Union[int, bool, FrozenSet[int]]


@dataclass(frozen=True)
class Condition:
    kind: Kind
    value: Payload


# one placeholder per kind; payloads are meaningless until instantiated
TEMPLATES: Tuple[Condition, ...] = (
    Condition(Kind.LARGER_THAN, 0),
    Condition(Kind.SMALLER_THAN, 0),
    Condition(Kind.CONTAINS_DIGIT, 0),
    Condition(Kind.SUM_OF_DIGITS, 0),
    Condition(Kind.HAS_FACTOR, 0),
    Condition(Kind.HAS_MULTIPLE, 0),
    Condition(Kind.IS_SQUARE, False),
    Condition(Kind.IS_CUBE, False),
    Condition(Kind.IS_PALINDROME, False),
    Condition(Kind.DOESNT_CONTAIN, frozenset()),
    Condition(Kind.CONTAINS_DIGIT_ALLITERATION, False),
)


def template_for(kind: Kind) -> Condition:
    for t in TEMPLATES:
        if t.kind == kind:
            return t
    raise ValueError(f"No template for kind {kind!r}.")


def is_square(n: int) -> bool:
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


def integer_cbrt(n: int) -> int:
    """Floor of the cube root of a non-negative integer, exact for any size."""
    if n < 2:
        return n
    # Newton from above; the start is at least cbrt(n)
    x = 1 << ((n.bit_length() + 2) // 3)
    while True:
        y = (2 * x + n // (x * x)) // 3
        if y >= x:
            return x
        x = y


def is_cube(n: int) -> bool:
    root = integer_cbrt(abs(n))
    return root * root * root == abs(n)


def is_palindrome(n: int) -> bool:
    digits = text_digits(n)
    return digits == digits[::-1]


def has_alliteration(n: int) -> bool:
    text = str(n)
    return any(str(d) * 2 in text for d in range(10))


def holds(condition: Condition, candidate: int) -> bool:
    """
    Does `condition` hold for `candidate`?

    Pure and total for any integer, except that divisibility kinds raise
    ZeroDivisionError when the divisor is 0 (HasMultiple with candidate 0,
    or a malformed HasFactor(0)). Use `satisfied` where that should count
    as "does not hold".
    """
    kind = condition.kind
    v = condition.value

    if kind == Kind.LARGER_THAN:
        return candidate > v
    if kind == Kind.SMALLER_THAN:
        return candidate < v
    if kind == Kind.CONTAINS_DIGIT:
        return v in text_digits(candidate)
    if kind == Kind.SUM_OF_DIGITS:
        return sum(text_digits(candidate)) == v
    if kind == Kind.HAS_FACTOR:
        if v == 0:
            raise ZeroDivisionError("HasFactor with factor 0 is malformed.")
        return candidate % v == 0
    if kind == Kind.HAS_MULTIPLE:
        if candidate == 0:
            raise ZeroDivisionError("HasMultiple is undefined for candidate 0.")
        return v % candidate == 0
    if kind == Kind.IS_SQUARE:
        return is_square(candidate) == v
    if kind == Kind.IS_CUBE:
        return is_cube(candidate) == v
    if kind == Kind.IS_PALINDROME:
        return is_palindrome(candidate) == v
    if kind == Kind.DOESNT_CONTAIN:
        return not any(d in v for d in text_digits(candidate))
    if kind == Kind.CONTAINS_DIGIT_ALLITERATION:
        return has_alliteration(candidate) == v

    raise ValueError(f"Unknown condition kind {kind!r}.")


def satisfied(condition: Condition, candidate: int) -> bool:
    """`holds`, with division by zero treated as not holding (a guess of 0 is legal)."""
    try:
        return holds(condition, candidate)
    except ZeroDivisionError:
        return False
