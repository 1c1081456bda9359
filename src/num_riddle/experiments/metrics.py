from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import List, Tuple


def mean_ci(values: List[int], z: float = 1.959963984540054) -> Tuple[float, float]:
    """
    Normal-approximation confidence interval for a mean (~95% by default).
    Returns (low, high).
    """
    n = len(values)
    if n == 0:
        return (0.0, 0.0)
    mu = sum(values) / n
    if n == 1:
        return (mu, mu)
    var = sum((v - mu) ** 2 for v in values) / (n - 1)
    half = z * math.sqrt(var / n)
    return (mu - half, mu + half)


@dataclass
class GuessStats:
    wins: int = 0
    losses: int = 0
    guesses: List[int] = field(default_factory=list)

    def record(self, guesses: int, won: bool) -> None:
        self.guesses.append(guesses)
        if won:
            self.wins += 1
        else:
            self.losses += 1

    @property
    def n(self) -> int:
        return self.wins + self.losses

    @property
    def winrate(self) -> float:
        return self.wins / self.n if self.n else 0.0

    @property
    def mean_guesses(self) -> float:
        return sum(self.guesses) / len(self.guesses) if self.guesses else 0.0

    def ci95(self) -> Tuple[float, float]:
        return mean_ci(self.guesses)
