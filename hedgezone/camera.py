"""Side-scrolling camera over a background split into horizontal chunks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from hedgezone.sprites import Rect, Sprite

VIEW_WIDTH = 1200
VIEW_HEIGHT = 896


@dataclass(frozen=True)
class ChunkView:
    """One background chunk as it should be drawn this frame."""

    index: int
    texture_rect: Rect
    position: tuple[float, float]


class Camera:
    """Follows a world position and decides which background chunks are visible."""

    def __init__(self, left: Sequence[float], right: Sequence[float],
                 chunks: Sequence[Sprite]) -> None:
        if not left or not (len(left) == len(right) == len(chunks)):
            raise ValueError("left, right and chunks must be non-empty and equal in length")
        self.left = tuple(float(v) for v in left)
        self.right = tuple(float(v) for v in right)
        self.chunks = list(chunks)
        self.index = 0
        self.camera_pos = 0.0
        self.camera_left = 0.0
        self.mix_pix = 0.0
        self.right_boundary = self.right[-1]

    def run(self, player_pos: float) -> list[ChunkView]:
        """Move to ``player_pos`` and return the chunk views to draw, in order."""
        pos = max(float(player_pos), 0.0)
        pos = min(pos, self.right_boundary - VIEW_WIDTH)
        self.camera_pos = pos
        last = len(self.chunks) - 1

        if pos > self.right[self.index] and self.index < last:
            self.index += 1
        elif pos < self.left[self.index] and self.index >= 0:
            self.index -= 1

        idx = self.index
        views: list[ChunkView] = []
        if self.left[idx] <= pos <= self.right[idx] and idx < last:
            self.camera_left = pos - self.left[idx]
            views.append(self._place(idx, Rect(int(self.camera_left), 0, VIEW_WIDTH, VIEW_HEIGHT),
                                     (0.0, 0.0)))
            if pos + VIEW_WIDTH > self.right[idx]:
                self.mix_pix = (pos + VIEW_WIDTH) - self.left[idx]
                views.append(self._place(idx + 1, Rect(0, 0, int(self.mix_pix), VIEW_HEIGHT),
                                         (self.right[idx] - pos, 0.0)))
        return views

    def _place(self, index: int, rect: Rect, position: tuple[float, float]) -> ChunkView:
        sprite = self.chunks[index]
        sprite.texture_rect = rect
        sprite.set_position(*position)
        return ChunkView(index, rect, sprite.position)

    def world_to_window(self, x: float) -> float:
        return x - self.camera_pos + VIEW_WIDTH / 2