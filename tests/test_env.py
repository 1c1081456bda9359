import pytest

from num_riddle.config import GameConfig
from num_riddle.env import GuessParseError, RiddleEnv, parse_guess
from num_riddle.rules import Condition, Kind, holds, satisfied


@pytest.fixture
def env():
    e = RiddleEnv(seed=1)
    e.reset(secret=144)
    return e


def test_reset_builds_full_shuffled_pool(env):
    assert env.seen == []
    assert len(env.unseen) == len(Kind)
    assert {c.kind for c in env.unseen} == set(Kind)
    assert all(holds(c, 144) for c in env.unseen)
    assert env.current_guess is None
    assert env.won is False


def test_square_scenario_payloads(env):
    by_kind = {c.kind: c for c in env.unseen}
    assert by_kind[Kind.IS_SQUARE].value is True
    assert by_kind[Kind.SUM_OF_DIGITS].value == 9
    assert by_kind[Kind.LARGER_THAN].value < 144


def test_unparsable_guess_changes_nothing(env):
    before = list(env.unseen)
    result = env.on_guess("abc")
    assert result.guess is None
    assert result.won is False
    assert result.conditions == []
    assert env.seen == []
    assert env.unseen == before
    assert env.history == []


def test_guessing_the_secret_reveals_everything_and_wins(env):
    env.on_guess("abc")
    result = env.on_guess("144")
    assert result.won is True
    assert env.unseen == []
    assert len(result.conditions) == len(Kind)
    assert all(s.satisfied for s in result.conditions)
    assert env.history[-1].revealed == len(Kind)


def test_spaces_are_stripped(env):
    assert env.on_guess(" 1 4 4 ").guess == 144


def test_failing_condition_stops_reveal_and_moves_first(env):
    env.reset(secret=100)
    env.unseen = [Condition(Kind.IS_SQUARE, True)]
    env.seen = [Condition(Kind.LARGER_THAN, 50), Condition(Kind.SUM_OF_DIGITS, 1)]

    result = env.step(60)

    assert env.seen == [Condition(Kind.SUM_OF_DIGITS, 1), Condition(Kind.LARGER_THAN, 50)]
    assert [s.satisfied for s in result.conditions] == [False, True]
    assert len(env.unseen) == 1
    assert result.won is False


def test_reorder_is_a_stable_partition(env):
    env.reset(secret=100)
    a = Condition(Kind.SUM_OF_DIGITS, 1)       # fails for 60
    b = Condition(Kind.LARGER_THAN, 50)        # holds
    c = Condition(Kind.CONTAINS_DIGIT, 1)      # fails
    d = Condition(Kind.SMALLER_THAN, 200)      # holds
    env.unseen = []
    env.seen = [a, b, c, d]

    env.step(60)

    assert env.seen == [a, c, b, d]


def test_old_conditions_are_never_unrevealed(env):
    env.on_guess("144")
    env.on_guess("7")
    assert len(env.seen) == len(Kind)
    assert env.won is False


def test_reveal_is_monotonic():
    env = RiddleEnv(seed=3)
    env.reset()
    total = env.pool_size
    prev_seen = 0
    for text in ["500", "abc", "100", "9999", "-5", "0", "", "1234", str(env.secret)]:
        env.on_guess(text)
        assert len(env.seen) >= prev_seen
        assert len(env.seen) + len(env.unseen) == total
        prev_seen = len(env.seen)
    assert env.won is True


def test_zero_guess_does_not_raise(env):
    env.unseen = []
    env.seen = [Condition(Kind.HAS_MULTIPLE, 288)]
    result = env.step(0)
    assert [s.satisfied for s in result.conditions] == [False]


@pytest.mark.parametrize("guess", [0, 7, 100, 144, 288, 1000, -144])
def test_win_iff_everything_revealed_and_holding(env, guess):
    result = env.step(guess)
    expected = not env.unseen and all(satisfied(c, guess) for c in env.seen)
    assert result.won is expected


def test_render_before_any_guess_uses_zero():
    env = RiddleEnv(seed=0)
    env.reset(secret=144)
    result = env.render()
    assert result.guess is None
    assert result.displayed_guess == 0


def test_same_seed_same_game():
    a, b = RiddleEnv(seed=42), RiddleEnv(seed=42)
    a.reset()
    b.reset()
    assert a.secret == b.secret
    assert a.unseen == b.unseen


def test_secret_is_drawn_from_configured_range():
    cfg = GameConfig(secret_min=100, secret_max=120)
    for seed in range(20):
        env = RiddleEnv(config=cfg, seed=seed)
        env.reset()
        assert 100 <= env.secret <= 120


def test_explicit_secret_outside_range_is_rejected():
    env = RiddleEnv()
    with pytest.raises(ValueError):
        env.reset(secret=50)


def test_configured_kinds_make_up_the_pool():
    cfg = GameConfig(kinds=(Kind.LARGER_THAN, Kind.SUM_OF_DIGITS))
    env = RiddleEnv(config=cfg)
    env.reset(secret=321)
    assert sorted(c.kind.value for c in env.unseen) == ["larger_than", "sum_of_digits"]


def test_guess_before_reset_is_a_programming_error():
    with pytest.raises(AssertionError):
        RiddleEnv().step(5)


def test_observation_hides_the_secret(env):
    env.on_guess("100")
    obs = env.observe()
    assert not hasattr(obs, "secret")
    assert obs.guess == 100
    assert obs.guesses_made == 1
    assert obs.pool_size == len(Kind)
    assert [s.condition for s in obs.shown] == env.seen


@pytest.mark.parametrize("text, value", [
    ("12", 12),
    ("+12", 12),
    ("-7", -7),
    ("1 2 3", 123),
    ("007", 7),
])
def test_parse_guess(text, value):
    assert parse_guess(text) == value


@pytest.mark.parametrize("text", ["", "   ", "abc", "12.5", "1_000", "0x10", "--1", "1e3"])
def test_parse_guess_rejects(text):
    with pytest.raises(GuessParseError):
        parse_guess(text)


def test_huge_guess_is_evaluated(env):
    env.on_guess("144")
    huge = "1" * 400
    result = env.on_guess(huge)
    assert result.guess == int(huge)
    assert result.won is False
    assert len(result.conditions) == len(Kind)
    assert not all(s.satisfied for s in result.conditions)


def test_overlong_guess_is_ignored(env):
    env.on_guess("100")
    seen = list(env.seen)
    result = env.on_guess("1" * 5000)
    assert result.guess == 100
    assert env.seen == seen
    assert len(env.history) == 1
