"""Lightweight sprite, clock and sound state plus the running animation."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

FRAME_INTERVAL = 1.0 / 60.0
FRAME_WIDTH = 40
FRAME_HEIGHT = 40
LAST_FRAME_LEFT = 440


@dataclass
class Rect:
    """Integer rectangle selecting a region of a texture."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Sprite:
    """Drawable state: texture, position, scale, texture region and tint."""

    texture: str | None = None
    position: tuple[float, float] = (0.0, 0.0)
    scale: tuple[float, float] = (1.0, 1.0)
    texture_rect: Rect | None = None
    color: tuple[int, int, int] | None = None

    def set_position(self, x: float, y: float) -> None:
        self.position = (float(x), float(y))

    def set_scale(self, sx: float, sy: float) -> None:
        self.scale = (float(sx), float(sy))


class Clock:
    """Measures elapsed seconds from a time source."""

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._now = time_source
        self._start = self._now()

    def elapsed(self) -> float:
        return self._now() - self._start

    def restart(self) -> float:
        """Reset the clock and return the time elapsed before the reset."""
        now = self._now()
        passed = now - self._start
        self._start = now
        return passed


@dataclass
class Sound:
    """A sound effect bound to a buffer file; counts how often it was played."""

    buffer: str
    volume: float = 100.0
    plays: int = field(default=0)

    def play(self) -> None:
        self.plays += 1


class Animations:
    """Cycles through the running frames of the hero's sprite sheets."""

    RIGHT_TEXTURE = "Data/0right.png"
    LEFT_TEXTURE = "Data/0left.png"

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock if clock is not None else Clock()
        self.right_rect = Rect(0, 0, FRAME_WIDTH, FRAME_HEIGHT)
        self.left_rect = Rect(LAST_FRAME_LEFT, 0, FRAME_WIDTH, FRAME_HEIGHT)
        self.right_source = Sprite(self.RIGHT_TEXTURE, (600.0, 560.0), (2.5, 2.5))
        self.left_source = Sprite(self.LEFT_TEXTURE, (600.0, 560.0), (2.5, 2.5))

    def run_right(self, sprite: Sprite) -> bool:
        """Advance the right-facing frame if a frame interval passed."""
        if self.clock.elapsed() <= FRAME_INTERVAL:
            return False
        if self.right_rect.left < LAST_FRAME_LEFT:
            self.right_rect.left += FRAME_WIDTH
        else:
            self.right_rect.left = 0
        sprite.texture = self.RIGHT_TEXTURE
        sprite.texture_rect = Rect(**vars(self.right_rect))
        self.clock.restart()
        return True

    def run_left(self, sprite: Sprite) -> bool:
        """Advance the left-facing frame if a frame interval passed."""
        if self.clock.elapsed() <= FRAME_INTERVAL:
            return False
        if self.left_rect.left > 0:
            self.left_rect.left -= FRAME_WIDTH
        else:
            self.left_rect.left = LAST_FRAME_LEFT
        sprite.texture = self.LEFT_TEXTURE
        sprite.texture_rect = Rect(**vars(self.left_rect))
        self.clock.restart()
        return True