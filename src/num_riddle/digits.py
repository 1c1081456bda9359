from __future__ import annotations
from typing import List


def digits_of(n: int) -> List[int]:
    """Decimal digits of a non-negative integer, most significant first (0 -> [0])."""
    return [int(ch) for ch in str(n)]


def text_digits(candidate: int) -> List[int]:
    # guesses may be negative; the sign is not a digit
    return digits_of(abs(candidate))
