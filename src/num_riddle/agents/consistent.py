from __future__ import annotations
import random
from typing import List

from .base import Agent
from ..rules import satisfied
from ..state import Observation


class ConsistentAgent(Agent):
    """
    Guesses a number that satisfies every condition shown so far.

    The secret satisfies every condition, so the candidate set is never
    empty, and a guess that satisfies everything shown always unlocks at
    least one more condition. The game is therefore won in at most
    pool_size + 1 guesses.

    strategy:
    - "lowest": smallest consistent candidate (deterministic)
    - "random": uniform among consistent candidates
    """

    STRATEGIES = ("lowest", "random")

    def __init__(self, seed: int = 0, lo: int = 100, hi: int = 9999, strategy: str = "lowest"):
        if strategy not in self.STRATEGIES:
            raise ValueError(f"Unknown strategy {strategy!r}.")
        self.rng = random.Random(seed)
        self.lo = lo
        self.hi = hi
        self.strategy = strategy
        # shown conditions never disappear, so filtering can be incremental
        self._pool: List[int] = list(range(lo, hi + 1))

    def candidates(self, obs: Observation) -> List[int]:
        conds = [s.condition for s in obs.shown]
        self._pool = [n for n in self._pool if all(satisfied(c, n) for c in conds)]
        return self._pool

    def act(self, obs: Observation) -> str:
        cands = self.candidates(obs)
        assert cands, "No candidate satisfies the shown conditions."
        if self.strategy == "lowest":
            return str(cands[0])
        return str(self.rng.choice(cands))
