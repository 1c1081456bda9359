from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .rules import Condition


@dataclass(frozen=True)
class ShownCondition:
    condition: Condition
    satisfied: bool
    text: str


@dataclass(frozen=True)
class GuessEvent:
    guess: int
    revealed: int  # conditions revealed by this guess
    won: bool


@dataclass(frozen=True)
class GuessResult:
    """
    What the presentation layer draws after a guess:
    the win banner (if any) first, then `conditions` in order.
    """
    won: bool
    guess: Optional[int]
    conditions: List[ShownCondition]

    @property
    def displayed_guess(self) -> int:
        return self.guess if self.guess is not None else 0


@dataclass(frozen=True)
class Observation:
    """
    What a player can observe. The secret is never part of it.
    """
    shown: List[ShownCondition]
    guess: Optional[int]
    won: bool
    guesses_made: int
    pool_size: int
