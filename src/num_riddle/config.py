from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .rules import Kind


@dataclass(frozen=True)
class GameConfig:
    """
    Knobs for a session. Defaults reproduce the classic game:
    a secret in 100..9999 (always at least 3 digits) and one condition per kind.
    """
    secret_min: int = 100
    secret_max: int = 9999
    smaller_than_span: int = 200
    multiplier_max: int = 9
    kinds: Tuple[Kind, ...] = tuple(Kind)

    def __post_init__(self):
        # LargerThan draws from [0, secret), so the secret must be positive
        if self.secret_min < 1:
            raise ValueError("secret_min must be at least 1.")
        if self.secret_min > self.secret_max:
            raise ValueError("secret_min must not exceed secret_max.")
        if self.smaller_than_span < 1:
            raise ValueError("smaller_than_span must be at least 1.")
        if self.multiplier_max < 1:
            raise ValueError("multiplier_max must be at least 1.")
        if not self.kinds:
            raise ValueError("kinds must not be empty.")
        if len(set(self.kinds)) != len(self.kinds):
            raise ValueError("kinds must not contain duplicates.")
