# src/autoplay/policies/random.py
import numpy as np # type: ignore


def policy_random(obs: np.ndarray, env) -> int:
    """
    Random policy: pick a uniformly random action from the env's own RNG.
    Expect it to lose most rounds.
    """
    return int(env.rng.integers(env.action_space_n))
