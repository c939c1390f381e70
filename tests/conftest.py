import os

# pygame must never open a real window or audio device under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from catcher.game import GamePhase, new_session
from catcher.geometry import Rect


@pytest.fixture
def session():
    return new_session(seed=1234)


@pytest.fixture
def playing(session):
    session.phase = GamePhase.PLAYING
    return session


class FakePlatform:
    """Records every call; replays scripted input frames."""

    def __init__(self, frames=(), keys=()):
        self.frames = list(frames)
        self.keys = list(keys)
        self.calls = []

    def load_image(self, path):
        self.calls.append(("load_image", path.name))
        return f"img:{path.name}"

    def load_music(self, path):
        self.calls.append(("load_music", path.name))
        return f"mus:{path.name}"

    def play_music_looping(self, music):
        self.calls.append(("play_music", music))

    def stop_music(self):
        self.calls.append(("stop_music",))

    def poll_input(self):
        return self.frames.pop(0) if self.frames else []

    def pressed_keys(self):
        return self.keys.pop(0) if self.keys else frozenset()

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw_filled_rectangle(self, rect, color):
        self.calls.append(("fill", Rect(rect.x, rect.y, rect.width, rect.height), color))

    def draw_image(self, image, dest):
        self.calls.append(("image", image, dest))

    def present_frame(self):
        self.calls.append(("present",))

    def wait_frame(self):
        self.calls.append(("wait",))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def fake_platform():
    return FakePlatform
