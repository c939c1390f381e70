# inputs.py
"""
Per-frame input, independent of the windowing library.

The platform turns its native events into the small records below;
collect_snapshot() folds one frame's worth of them into an InputSnapshot
that the game logic consumes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"


# ---------- Events ----------
@dataclass(frozen=True)
class QuitEvent:
    pass


@dataclass(frozen=True)
class KeyDown:
    key: Key


@dataclass(frozen=True)
class PointerMove:
    x: int
    y: int


@dataclass(frozen=True)
class PointerClick:
    x: int
    y: int


InputEvent = Union[QuitEvent, KeyDown, PointerMove, PointerClick]


# ---------- Snapshot ----------
@dataclass
class InputSnapshot:
    pointer_x: Optional[int] = None          # x of the last pointer motion this frame
    clicks: List[Tuple[int, int]] = field(default_factory=list)
    motions: List[Tuple[int, int]] = field(default_factory=list)   # (x, clicks seen before it)
    keys_held: FrozenSet[Key] = frozenset()
    quit: bool = False


def collect_snapshot(events: Iterable[InputEvent], keys_held: Iterable[Key] = ()) -> InputSnapshot:
    """Fold one frame of events (in arrival order) plus the held-key set into a snapshot."""
    snap = InputSnapshot(keys_held=frozenset(keys_held))
    for event in events:
        if isinstance(event, QuitEvent):
            snap.quit = True
        elif isinstance(event, KeyDown):
            if event.key is Key.ESCAPE:
                snap.quit = True
        elif isinstance(event, PointerMove):
            snap.pointer_x = event.x
            snap.motions.append((event.x, len(snap.clicks)))
        elif isinstance(event, PointerClick):
            snap.clicks.append((event.x, event.y))
    return snap
