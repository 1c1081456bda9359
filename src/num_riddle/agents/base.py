from __future__ import annotations
from abc import ABC, abstractmethod
from ..state import GuessResult, Observation


class Agent(ABC):
    @abstractmethod
    def act(self, obs: Observation) -> str:
        """Return raw guess text, exactly as a player would type it."""
        ...

    def observe_result(self, result: GuessResult) -> None:
        """Hook called with the rendered state after each guess."""
        return
