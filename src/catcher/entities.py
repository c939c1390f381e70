# entities.py
from dataclasses import dataclass
import random

from .config import (
    WIDTH, HEIGHT,
    PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_MARGIN,
    BLOCK_SIZE,
)
from .geometry import Rect


@dataclass
class Paddle:
    rect: Rect

    def center_on(self, x: int) -> None:
        self.rect.x = x - self.rect.width // 2

    def move_by(self, dx: int) -> None:
        self.rect.x += dx

    def clamp(self, screen_width: int = WIDTH) -> None:
        """Keep the paddle fully on screen."""
        self.rect.x = max(0, min(self.rect.x, screen_width - self.rect.width))


@dataclass
class Block:
    rect: Rect

    def fall(self, speed: int) -> None:
        self.rect.y += speed

    def respawn(self, rng: random.Random, screen_width: int = WIDTH) -> None:
        # uniform over [0, screen_width - size)
        self.rect.x = rng.randrange(screen_width - self.rect.width)
        self.rect.y = 0


def new_paddle() -> Paddle:
    return Paddle(
        Rect(
            x=(WIDTH - PADDLE_WIDTH) // 2,
            y=HEIGHT - PADDLE_HEIGHT - PADDLE_MARGIN,
            width=PADDLE_WIDTH,
            height=PADDLE_HEIGHT,
        )
    )


def new_block(rng: random.Random) -> Block:
    block = Block(Rect(0, 0, BLOCK_SIZE, BLOCK_SIZE))
    block.respawn(rng)
    return block
