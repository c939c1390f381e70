import csv

import numpy as np
import pytest

from autoplay.env import CatcherEnv, LEFT, RIGHT, STAY
from autoplay.policies import policy_follow, policy_random
from autoplay.run import main, run_episode
from catcher.config import MAX_MISTAKES
from catcher.game import GamePhase


def test_reset_starts_in_play():
    env = CatcherEnv(seed_value=5)
    obs = env.reset()
    assert env.session.phase is GamePhase.PLAYING
    assert obs.shape == env.observation_space_shape
    assert obs.dtype == np.float32


def test_reset_is_reproducible():
    env = CatcherEnv()
    a = env.reset(seed=11)
    b = env.reset(seed=11)
    assert np.array_equal(a, b)


def test_actions_move_paddle():
    env = CatcherEnv(seed_value=1)
    env.reset()
    x0 = env.session.paddle.rect.x
    env.step(LEFT)
    assert env.session.paddle.rect.x == x0 - 10
    env.step(RIGHT)
    env.step(STAY)
    assert env.session.paddle.rect.x == x0


def test_miss_gives_negative_reward():
    env = CatcherEnv(seed_value=1)
    env.reset()
    env.session.paddle.rect.x = 0
    env.session.block.rect.x = 700
    env.session.block.rect.y = 601
    _obs, reward, done, info = env.step(STAY)
    assert reward == env.miss_reward
    assert not done
    assert info["mistakes"] == 1


def test_standing_still_loses_eventually():
    env = CatcherEnv(seed_value=3)
    env.reset()
    done = False
    info = {}
    while not done:
        _obs, _r, done, info = env.step(STAY)
        assert info["steps"] < 20_000
    assert info["mistakes"] == MAX_MISTAKES


def test_follow_policy_catches_everything():
    env = CatcherEnv(seed_value=0, max_steps=3000)
    steps, catches, mistakes = run_episode(env, "follow")
    assert steps == 3000
    assert mistakes == 0
    assert catches > 0


def test_random_policy_is_deterministic_per_seed():
    a = run_episode(CatcherEnv(max_steps=2000), "random", seed=4)
    b = run_episode(CatcherEnv(max_steps=2000), "random", seed=4)
    assert a == b


def test_policies_return_valid_actions():
    env = CatcherEnv(seed_value=2)
    obs = env.reset()
    for _ in range(50):
        assert policy_random(obs, env) in (STAY, LEFT, RIGHT)
        assert policy_follow(obs, env) in (STAY, LEFT, RIGHT)
        obs, *_ = env.step(STAY)


def test_unknown_policy():
    with pytest.raises(ValueError):
        run_episode(CatcherEnv(), "psychic")


def test_cli_writes_csv(tmp_path):
    out = main(["--episodes", "2", "--policy", "follow", "--max-steps", "200", "--outdir", str(tmp_path)])
    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["ep", "steps", "catches", "mistakes"]
    assert [r[0] for r in rows[1:]] == ["1", "2"]
    assert all(r[1] == "200" for r in rows[1:])
