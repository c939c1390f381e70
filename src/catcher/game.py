# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import random
import time

from .config import (
    WIDTH, HEIGHT,
    PADDLE_SPEED, BLOCK_SPEED, MAX_MISTAKES,
    PLAY_BUTTON_X, PLAY_BUTTON_Y, PLAY_BUTTON_W, PLAY_BUTTON_H,
)
from .entities import Block, Paddle, new_block, new_paddle
from .geometry import Rect, contains_point, intersects
from .inputs import InputSnapshot, Key


def play_button_rect() -> Rect:
    """Menu hit area; a fresh Rect each call so callers cannot move the button."""
    return Rect(PLAY_BUTTON_X, PLAY_BUTTON_Y, PLAY_BUTTON_W, PLAY_BUTTON_H)


class GamePhase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Effect(Enum):
    """Side effects requested by a tick; the driver carries them out."""
    PLAY_MUSIC = "play_music"
    STOP_MUSIC = "stop_music"
    CAUGHT = "caught"
    MISSED = "missed"
    GAME_OVER = "game_over"


# ---------- State ----------
@dataclass
class GameSession:
    phase: GamePhase
    paddle: Paddle
    block: Block
    rng: random.Random
    seed: int
    mistakes: int = 0
    max_mistakes: int = MAX_MISTAKES


def new_session(seed: Optional[int] = None) -> GameSession:
    """Fresh session in the menu. Without a seed the wall clock is used."""
    if seed is None:
        seed = time.time_ns()
    rng = random.Random(seed)
    return GameSession(
        phase=GamePhase.MENU,
        paddle=new_paddle(),
        block=new_block(rng),
        rng=rng,
        seed=seed,
    )


# ---------- Update ----------
def _handle_clicks(session: GameSession, snapshot: InputSnapshot, out: List[Effect]) -> int:
    """Number of clicks read before play began this frame (0 if it already had)."""
    if session.phase is not GamePhase.MENU:
        return 0
    button = play_button_rect()
    for n, (cx, cy) in enumerate(snapshot.clicks, 1):
        if contains_point(button, cx, cy):
            session.phase = GamePhase.PLAYING
            out.append(Effect.PLAY_MUSIC)
            return n
    return len(snapshot.clicks)


def _pointer_x(snapshot: InputSnapshot, clicks_before: int) -> Optional[int]:
    # motions that arrived while still in the menu do not count
    if clicks_before == 0:
        return snapshot.pointer_x
    xs = [x for x, seen in snapshot.motions if seen >= clicks_before]
    return xs[-1] if xs else None


def _move_paddle(session: GameSession, snapshot: InputSnapshot, pointer_x: Optional[int]) -> None:
    # pointer is absolute, keys are incremental; both apply in the same tick
    paddle = session.paddle
    if pointer_x is not None:
        paddle.center_on(pointer_x)
    if Key.LEFT in snapshot.keys_held:
        paddle.move_by(-PADDLE_SPEED)
    if Key.RIGHT in snapshot.keys_held:
        paddle.move_by(PADDLE_SPEED)
    paddle.clamp(WIDTH)


def _advance_block(session: GameSession, out: List[Effect]) -> None:
    block = session.block
    block.fall(BLOCK_SPEED)

    # catch is checked first so a block can never count as both
    if intersects(session.paddle.rect, block.rect):
        block.respawn(session.rng, WIDTH)
        out.append(Effect.CAUGHT)
    elif block.rect.y > HEIGHT:
        session.mistakes += 1
        block.respawn(session.rng, WIDTH)
        out.append(Effect.MISSED)
        if session.mistakes >= session.max_mistakes:
            session.phase = GamePhase.GAME_OVER
            out.append(Effect.GAME_OVER)
            out.append(Effect.STOP_MUSIC)


def tick(session: GameSession, snapshot: InputSnapshot) -> List[Effect]:
    """
    Advance the session by one frame and return the effects it raised, in order.
    - MENU: a click on the play button starts play (and the music).
    - PLAYING: move paddle, drop block, resolve catch/miss.
    - GAME_OVER: nothing changes.
    Never raises.
    """
    out: List[Effect] = []
    clicks_before = _handle_clicks(session, snapshot, out)

    if session.phase is GamePhase.PLAYING:
        _move_paddle(session, snapshot, _pointer_x(snapshot, clicks_before))
        _advance_block(session, out)

    return out
