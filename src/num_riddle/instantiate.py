from __future__ import annotations
import random
from typing import Iterable, List, Optional, Sequence

from .config import GameConfig
from .digits import digits_of
from .rules import (
    Condition,
    InvariantViolation,
    Kind,
    has_alliteration,
    is_cube,
    is_palindrome,
    is_square,
)


def _pick(rng: random.Random, choices: Sequence[int], what: str) -> int:
    if not choices:
        raise InvariantViolation(f"Cannot choose {what}: no candidates.")
    return rng.choice(choices)


def divisors(n: int) -> List[int]:
    return [i for i in range(1, n + 1) if n % i == 0]


def instantiate(
    template: Condition,
    secret: int,
    rng: random.Random,
    config: Optional[GameConfig] = None,
) -> Condition:
    """
    Turn a template into a concrete condition of the same kind that holds for `secret`.

    `rng` is only consulted where more than one payload is valid:
    - LargerThan: n in [0, secret)
    - SmallerThan: n in (secret, secret + span]
    - ContainsDigit: one of the secret's digits
    - HasFactor: one of the secret's divisors
    - HasMultiple: k * secret with k in [1, multiplier_max]
    The remaining kinds are derived from the secret alone.
    """
    cfg = config or GameConfig()
    kind = template.kind

    if kind == Kind.LARGER_THAN:
        if secret < 1:
            raise InvariantViolation(f"LargerThan needs a positive secret, got {secret}.")
        return Condition(kind, rng.randint(0, secret - 1))
    if kind == Kind.SMALLER_THAN:
        return Condition(kind, secret + rng.randint(1, cfg.smaller_than_span))
    if kind == Kind.CONTAINS_DIGIT:
        return Condition(kind, _pick(rng, digits_of(secret), "a digit"))
    if kind == Kind.SUM_OF_DIGITS:
        return Condition(kind, sum(digits_of(secret)))
    if kind == Kind.HAS_FACTOR:
        return Condition(kind, _pick(rng, divisors(secret), "a factor"))
    if kind == Kind.HAS_MULTIPLE:
        return Condition(kind, secret * rng.randint(1, cfg.multiplier_max))
    if kind == Kind.IS_SQUARE:
        return Condition(kind, is_square(secret))
    if kind == Kind.IS_CUBE:
        return Condition(kind, is_cube(secret))
    if kind == Kind.IS_PALINDROME:
        return Condition(kind, is_palindrome(secret))
    if kind == Kind.DOESNT_CONTAIN:
        return Condition(kind, frozenset(range(10)) - frozenset(digits_of(secret)))
    if kind == Kind.CONTAINS_DIGIT_ALLITERATION:
        return Condition(kind, has_alliteration(secret))

    raise ValueError(f"Unknown condition kind {kind!r}.")


def instantiate_pool(
    templates: Iterable[Condition],
    secret: int,
    rng: random.Random,
    config: Optional[GameConfig] = None,
) -> List[Condition]:
    return [instantiate(t, secret, rng, config) for t in templates]
