from __future__ import annotations
from typing import Callable, Optional, Tuple

from ..agents.base import Agent
from ..agents.consistent import ConsistentAgent
from ..config import GameConfig
from ..env import RiddleEnv
from .metrics import GuessStats


def play_game(env: RiddleEnv, agent: Agent, max_guesses: int = 50) -> Tuple[int, bool]:
    """Returns (guesses_used, won). The env must already be reset."""
    obs = env.observe()
    while not obs.won and obs.guesses_made < max_guesses:
        result = env.on_guess(agent.act(obs))
        agent.observe_result(result)
        obs = env.observe()
    return obs.guesses_made, obs.won


def eval_agent(
    n_games: int,
    seed: int,
    agent_factory: Callable[[int, GameConfig], Agent],
    config: Optional[GameConfig] = None,
    max_guesses: int = 50,
) -> GuessStats:
    cfg = config or GameConfig()
    stats = GuessStats()
    for g in range(n_games):
        env = RiddleEnv(config=cfg, seed=seed + g)
        env.reset()
        agent = agent_factory(seed + 1000 + g, cfg)
        guesses, won = play_game(env, agent, max_guesses=max_guesses)
        stats.record(guesses, won)
    return stats


def consistent_factory(strategy: str) -> Callable[[int, GameConfig], Agent]:
    def make(seed: int, cfg: GameConfig) -> Agent:
        return ConsistentAgent(seed=seed, lo=cfg.secret_min, hi=cfg.secret_max, strategy=strategy)
    return make


def _print_stats(title: str, s: GuessStats):
    lo, hi = s.ci95()
    print(title)
    print(f"  winrate: {s.winrate:.3f}   games={s.n}")
    print(f"  mean guesses: {s.mean_guesses:.2f}  (95% CI {lo:.2f}..{hi:.2f})")


def main(n_games: int = 100, seed: int = 0, config: Optional[GameConfig] = None):
    for strategy in ConsistentAgent.STRATEGIES:
        stats = eval_agent(n_games, seed, consistent_factory(strategy), config)
        _print_stats(f"== ConsistentAgent ({strategy}) ==", stats)


if __name__ == "__main__":
    main()
