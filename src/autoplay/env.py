# src/autoplay/env.py
from __future__ import annotations
from dataclasses import dataclass

import numpy as np  # type: ignore

from catcher.config import WIDTH, HEIGHT, MAX_MISTAKES
from catcher.game import GamePhase, GameSession, Effect, new_session, play_button_rect, tick
from catcher.inputs import InputSnapshot, Key

# -----------------------------------------------------------------------------
# Actions: integers -> held keys
# -----------------------------------------------------------------------------
STAY, LEFT, RIGHT = 0, 1, 2
ACTIONS = {
    STAY: frozenset(),
    LEFT: frozenset({Key.LEFT}),
    RIGHT: frozenset({Key.RIGHT}),
}

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def _obs(session: GameSession) -> np.ndarray:
    """
    Compact 5-D observation:
      0: paddle x normalized in [0, 1]
      1: block x normalized in [0, 1]
      2: block y normalized in [0, 1] (can exceed 1 for one tick before a miss)
      3: offset  - (block centre - paddle centre) / screen width, in [-1, 1]
      4: mistakes / threshold
    """
    paddle = session.paddle.rect
    block = session.block.rect

    paddle_cx = paddle.x + paddle.width / 2
    block_cx = block.x + block.width / 2

    return np.array(
        [
            paddle.x / max(WIDTH - paddle.width, 1),
            block.x / max(WIDTH - block.width, 1),
            block.y / HEIGHT,
            (block_cx - paddle_cx) / WIDTH,
            session.mistakes / MAX_MISTAKES,
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Headless environment
# -----------------------------------------------------------------------------
@dataclass
class CatcherEnv:
    """
    Gym-like wrapper that plays the game without a window.

    Rewards:
      + catch_reward per catch
      + miss_reward per miss
    An episode ends at game over or after max_steps.
    """
    catch_reward: float = 1.0
    miss_reward: float  = -1.0
    seed_value: int     = 0
    max_steps: int      = 10_000

    def __post_init__(self):
        self.rng = np.random.default_rng(self.seed_value)
        self.session: GameSession | None = None
        self.steps = 0
        self.catches = 0

    def reset(self, seed: int | None = None) -> np.ndarray:
        """
        Start a new episode, already past the menu: the play button is
        clicked on the first tick so the returned observation is in play.
        """
        if seed is not None:
            self.seed_value = seed
            self.rng = np.random.default_rng(seed)

        self.session = new_session(self.seed_value)
        button = play_button_rect()
        cx = button.x + button.width // 2
        cy = button.y + button.height // 2
        tick(self.session, InputSnapshot(clicks=[(cx, cy)]))
        self.steps = 0
        self.catches = 0
        return _obs(self.session)

    def step(self, action: int):
        """
        Hold the keys for `action` for one tick and return:
          (obs, reward, terminated, info)
        """
        assert self.session is not None, "Call reset() first."
        assert action in ACTIONS, f"Invalid action {action}"

        effects = tick(self.session, InputSnapshot(keys_held=ACTIONS[action]))
        self.steps += 1

        reward = 0.0
        for effect in effects:
            if effect is Effect.CAUGHT:
                self.catches += 1
                reward += self.catch_reward
            elif effect is Effect.MISSED:
                reward += self.miss_reward

        terminated = self.session.phase is GamePhase.GAME_OVER
        info = {
            "steps": self.steps,
            "catches": self.catches,
            "mistakes": self.session.mistakes,
        }
        if self.steps >= self.max_steps and not terminated:
            info["truncated"] = True
        return _obs(self.session), reward, terminated, info

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        return (5,)
