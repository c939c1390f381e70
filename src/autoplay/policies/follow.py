# src/autoplay/policies/follow.py
import numpy as np # type: ignore

from catcher.config import WIDTH, PADDLE_SPEED
from autoplay.env import STAY, LEFT, RIGHT

# Offsets smaller than one paddle step are left alone to avoid jitter.
DEAD_ZONE = PADDLE_SPEED / WIDTH


def policy_follow(obs: np.ndarray, env) -> int:
    """
    Move toward the block centre using the offset feature (obs[3]).
    Paddle speed is twice the fall speed, so this catches nearly everything.
    """
    offset = float(obs[3])
    if offset < -DEAD_ZONE:
        return LEFT
    if offset > DEAD_ZONE:
        return RIGHT
    return STAY
