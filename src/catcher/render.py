# render.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from .config import PADDLE_COLOR, BLOCK_COLOR
from .game import GamePhase, GameSession, play_button_rect
from .geometry import Rect

Color = Tuple[int, int, int]


class ImageId(Enum):
    PLAY_BUTTON = "play_button"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class FillRect:
    rect: Rect
    color: Color


@dataclass(frozen=True)
class DrawImage:
    image: ImageId
    dest: Optional[Rect]    # None -> whole screen


DrawCommand = Union[FillRect, DrawImage]


def build_draw_commands(session: GameSession) -> List[DrawCommand]:
    """Draw list for the current phase; later commands paint over earlier ones."""
    if session.phase is GamePhase.MENU:
        return [DrawImage(ImageId.PLAY_BUTTON, play_button_rect())]
    if session.phase is GamePhase.PLAYING:
        return [
            FillRect(session.paddle.rect.copy(), PADDLE_COLOR),
            FillRect(session.block.rect.copy(), BLOCK_COLOR),
        ]
    return [DrawImage(ImageId.GAME_OVER, None)]
