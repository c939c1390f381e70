# platform.py
"""
Platform services for the game: window, drawing, input, images and music.

The game logic never imports pygame. Everything it needs from the outside
world goes through the Platform protocol; PygamePlatform is the real
implementation and tests substitute a recording fake.
"""
from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, FrozenSet, Iterator, List, Optional, Protocol

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, BG,
    PLAY_BUTTON_IMAGE, GAME_OVER_IMAGE, MUSIC_TRACK,
    CFG, Config,
)
from .errors import AssetLoadError, InitializationError
from .geometry import Rect
from .inputs import InputEvent, Key, KeyDown, PointerClick, PointerMove, QuitEvent
from .render import Color

_KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}


class Platform(Protocol):
    def load_image(self, path: Path) -> Any: ...
    def load_music(self, path: Path) -> Any: ...
    def play_music_looping(self, music: Any) -> None: ...
    def stop_music(self) -> None: ...
    def poll_input(self) -> List[InputEvent]: ...
    def pressed_keys(self) -> FrozenSet[Key]: ...
    def clear(self, color: Color) -> None: ...
    def draw_filled_rectangle(self, rect: Rect, color: Color) -> None: ...
    def draw_image(self, image: Any, dest: Optional[Rect]) -> None: ...
    def present_frame(self) -> None: ...
    def wait_frame(self) -> None: ...


@dataclass
class Assets:
    play_button: Any
    game_over: Any
    music: Any


def load_assets(platform: Platform, asset_dir: Path) -> Assets:
    """Load the three required assets. Any failure is fatal (AssetLoadError)."""
    asset_dir = Path(asset_dir)
    print(f"[INIT] Loading assets from {asset_dir}")
    return Assets(
        play_button=platform.load_image(asset_dir / PLAY_BUTTON_IMAGE),
        game_over=platform.load_image(asset_dir / GAME_OVER_IMAGE),
        music=platform.load_music(asset_dir / MUSIC_TRACK),
    )


# ---------- pygame ----------
class PygamePlatform:
    def __init__(self, screen: pygame.Surface, fps: int) -> None:
        self.screen = screen
        self.fps = fps
        self.clock = pygame.time.Clock()

    # Assets -------------------------------------------------------------------
    def load_image(self, path: Path) -> pygame.Surface:
        path = Path(path)
        if not path.is_file():
            raise AssetLoadError(path, "file not found")
        try:
            return pygame.image.load(str(path)).convert_alpha()
        except pygame.error as exc:
            raise AssetLoadError(path, str(exc)) from exc

    def load_music(self, path: Path) -> Path:
        path = Path(path)
        if not path.is_file():
            raise AssetLoadError(path, "file not found")
        try:
            pygame.mixer.music.load(str(path))
        except pygame.error as exc:
            raise AssetLoadError(path, str(exc)) from exc
        return path

    # Audio --------------------------------------------------------------------
    def play_music_looping(self, music: Path) -> None:
        pygame.mixer.music.load(str(music))
        pygame.mixer.music.play(-1)

    def stop_music(self) -> None:
        pygame.mixer.music.stop()

    # Input --------------------------------------------------------------------
    def poll_input(self) -> List[InputEvent]:
        events: List[InputEvent] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events.append(QuitEvent())
            elif event.type == pygame.KEYDOWN and event.key in _KEYMAP:
                events.append(KeyDown(_KEYMAP[event.key]))
            elif event.type == pygame.MOUSEMOTION:
                events.append(PointerMove(*event.pos))
            elif event.type == pygame.MOUSEBUTTONDOWN:
                events.append(PointerClick(*event.pos))
        return events

    def pressed_keys(self) -> FrozenSet[Key]:
        state = pygame.key.get_pressed()
        return frozenset(key for code, key in _KEYMAP.items() if state[code])

    # Drawing ------------------------------------------------------------------
    def clear(self, color: Color = BG) -> None:
        self.screen.fill(color)

    def draw_filled_rectangle(self, rect: Rect, color: Color) -> None:
        pygame.draw.rect(self.screen, color, pygame.Rect(rect.x, rect.y, rect.width, rect.height))

    def draw_image(self, image: pygame.Surface, dest: Optional[Rect]) -> None:
        # images are stretched to fill their destination
        if dest is None:
            self.screen.blit(pygame.transform.scale(image, self.screen.get_size()), (0, 0))
        else:
            self.screen.blit(pygame.transform.scale(image, (dest.width, dest.height)), (dest.x, dest.y))

    def present_frame(self) -> None:
        pygame.display.flip()

    def wait_frame(self) -> None:
        self.clock.tick(self.fps)


def _start(what: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    try:
        return fn(*args, **kwargs)
    except pygame.error as exc:
        raise InitializationError(f"Could not initialize {what}: {exc}") from exc


@contextmanager
def open_platform(cfg: Config = CFG) -> Iterator[PygamePlatform]:
    """
    Bring up video, audio and the window, and tear down whatever was
    started on every exit path, including a failure halfway through.
    """
    with ExitStack() as stack:
        _start("video", pygame.display.init)
        stack.callback(pygame.quit)

        _start("audio", pygame.mixer.init, frequency=44100, size=-16, channels=2, buffer=2048)
        stack.callback(pygame.mixer.quit)

        screen = _start("window", pygame.display.set_mode, (WIDTH, HEIGHT))
        pygame.display.set_caption(cfg.caption)
        stack.callback(pygame.mixer.music.stop)

        print("[INIT] Platform ready")
        yield PygamePlatform(screen, cfg.fps)
