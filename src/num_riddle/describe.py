from __future__ import annotations

from .rules import Condition, Kind


def _must(flag: bool) -> str:
    return "must" if flag else "must not"


def describe(condition: Condition) -> str:
    kind = condition.kind
    v = condition.value

    if kind == Kind.LARGER_THAN:
        return f"The number must be larger than {v}"
    if kind == Kind.SMALLER_THAN:
        return f"The number must be smaller than {v}"
    if kind == Kind.CONTAINS_DIGIT:
        return f"The number must contain the digit {v}"
    if kind == Kind.SUM_OF_DIGITS:
        return f"The digits of the number must sum to {v}"
    if kind == Kind.HAS_FACTOR:
        return f"The number must have the factor {v}"
    if kind == Kind.HAS_MULTIPLE:
        return f"The number must be a factor of {v}"
    if kind == Kind.IS_SQUARE:
        return f"The number {_must(v)} be a square"
    if kind == Kind.IS_CUBE:
        return f"The number {_must(v)} be a cube"
    if kind == Kind.IS_PALINDROME:
        return f"The number {_must(v)} be a palindrome"
    if kind == Kind.DOESNT_CONTAIN:
        if not v:
            return "The number has no excluded digits"
        return "The number must not contain the digits " + ", ".join(str(d) for d in sorted(v))
    if kind == Kind.CONTAINS_DIGIT_ALLITERATION:
        return f"The number {_must(v)} contain the same digit twice in a row"

    raise ValueError(f"Unknown condition kind {kind!r}.")
