from __future__ import annotations
import logging
import random
import re
from typing import List, Optional

from .config import GameConfig
from .describe import describe
from .instantiate import instantiate_pool
from .rules import Condition, satisfied, template_for
from .state import GuessEvent, GuessResult, Observation, ShownCondition

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class GuessParseError(ValueError):
    pass


def parse_guess(text: str) -> int:
    """Strip every space, then read a signed base-10 integer."""
    cleaned = text.replace(" ", "")
    if not _INTEGER.fullmatch(cleaned):
        raise GuessParseError(f"Not an integer: {text!r}")
    try:
        return int(cleaned)
    except ValueError as e:
        # digit strings past the interpreter's conversion limit
        raise GuessParseError(f"Integer too long: {len(cleaned)} characters") from e


class RiddleEnv:
    """
    One game of "guess the number".

    The secret is drawn once per reset, one concrete condition per configured
    kind is generated from it and shuffled into `unseen`. Each accepted guess
    reveals conditions from the tail of `unseen` for as long as everything
    already in `seen` holds for the guess, then moves failing conditions in
    front of holding ones (stable). Nothing is ever un-revealed.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = 0,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(seed)

        self.secret: Optional[int] = None
        self.unseen: List[Condition] = []
        self.seen: List[Condition] = []
        self.current_guess: Optional[int] = None
        self.won = False
        self.history: List[GuessEvent] = []

    def reset(self, secret: Optional[int] = None) -> Observation:
        cfg = self.config
        if secret is None:
            secret = self.rng.randint(cfg.secret_min, cfg.secret_max)
        elif not (cfg.secret_min <= secret <= cfg.secret_max):
            raise ValueError(
                f"Secret {secret} outside configured range {cfg.secret_min}..{cfg.secret_max}."
            )

        templates = [template_for(k) for k in cfg.kinds]
        pool = instantiate_pool(templates, secret, self.rng, cfg)
        self.rng.shuffle(pool)

        self.secret = secret
        self.unseen = pool
        self.seen = []
        self.current_guess = None
        self.won = False
        self.history = []
        logger.info("New game with %d conditions.", len(pool))
        return self.observe()

    @property
    def pool_size(self) -> int:
        return len(self.seen) + len(self.unseen)

    def _all_seen_hold(self, guess: int) -> bool:
        return all(satisfied(c, guess) for c in self.seen)

    def on_guess(self, text: str) -> GuessResult:
        """
        Input-channel entry point. Malformed text changes nothing; the last
        state is rendered again.
        """
        try:
            guess = parse_guess(text)
        except GuessParseError:
            logger.debug("Ignoring unparsable guess %r.", text)
            return self.render()
        return self.step(guess)

    def step(self, guess: int) -> GuessResult:
        assert self.secret is not None, "Call reset() before guessing."
        self.current_guess = guess

        # ---- reveal ----
        revealed = 0
        while self.unseen and self._all_seen_hold(guess):
            cond = self.unseen.pop()
            self.seen.append(cond)
            revealed += 1
            logger.debug("Revealed %s (%d left).", cond.kind.value, len(self.unseen))

        # ---- failing first; sort is stable ----
        self.seen.sort(key=lambda c: satisfied(c, guess))

        # ---- win ----
        self.won = not self.unseen and self._all_seen_hold(guess)

        self.history.append(GuessEvent(guess=guess, revealed=revealed, won=self.won))
        if self.won:
            logger.info("Solved with %d after %d guesses.", guess, len(self.history))
        return self.render()

    def render(self) -> GuessResult:
        candidate = self.current_guess if self.current_guess is not None else 0
        shown = [
            ShownCondition(condition=c, satisfied=satisfied(c, candidate), text=describe(c))
            for c in self.seen
        ]
        return GuessResult(won=self.won, guess=self.current_guess, conditions=shown)

    def observe(self) -> Observation:
        result = self.render()
        return Observation(
            shown=result.conditions,
            guess=self.current_guess,
            won=self.won,
            guesses_made=len(self.history),
            pool_size=self.pool_size,
        )
