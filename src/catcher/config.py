from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# ----- Window -----
WIDTH, HEIGHT = 800, 600
CAPTION = "Catch the Block"

# ----- Entities -----
PADDLE_WIDTH, PADDLE_HEIGHT = 100, 20
PADDLE_MARGIN = 10            # gap between paddle and bottom edge
BLOCK_SIZE = 30

# ----- Rules (px per tick) -----
PADDLE_SPEED = 10
BLOCK_SPEED = 5
MAX_MISTAKES = 5

# ----- Menu -----
PLAY_BUTTON_W, PLAY_BUTTON_H = 250, 100
PLAY_BUTTON_X = (WIDTH - PLAY_BUTTON_W) // 2
PLAY_BUTTON_Y = (HEIGHT - PLAY_BUTTON_H) // 2

# ----- Colors -----
BG           = (33, 33, 33)
PADDLE_COLOR = (100, 180, 255)
BLOCK_COLOR  = (255, 220, 50)

# ----- Assets -----
PLAY_BUTTON_IMAGE = "play_button.png"
GAME_OVER_IMAGE   = "game_over.png"
MUSIC_TRACK       = "background_music.mp3"

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None    # None -> wall clock, reported at startup
    fps: int = 60
    asset_dir: Path = field(default_factory=Path.cwd)
    caption: str = CAPTION

CFG = Config()
