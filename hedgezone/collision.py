"""Grid-based collision between a hitbox and the level's obstacles and items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, NamedTuple

from hedgezone.sprites import Sound

EMPTY = "e"
WALL = "w"
BREAKABLE = "b"
SPIKE = "s"
PIT = "h"
PLATFORM = "p"
RING = "r"
BOOST = "b"
HEALTH = "h"

RING_SOUND = "Sprites/Sounds/Global/Ring.wav"

Grid = MutableSequence[MutableSequence[str]]


def _cell(value: float, size: int) -> int:
    """Truncate to an integer, then divide truncating toward zero."""
    whole = int(value)
    quotient = abs(whole) // size
    return quotient if whole >= 0 else -quotient


class _HitPoints(NamedTuple):
    bottom_left: str
    left_mid: str
    right_mid: str
    bottom_right: str
    top_left: str
    top_right: str
    top_mid: str


@dataclass
class MovementFlags:
    """Movement permissions and events updated by collision detection."""

    move_right: bool = True
    move_left: bool = True
    move_up: bool = True
    move_down: bool = True
    on_spike: bool = False
    quick_jump: bool = False
    pit_found: bool = False


@dataclass
class ItemPickup:
    """What a single item check collected."""

    rings: int = 0
    health: int = 0
    boost: bool = False


@dataclass(frozen=True)
class _Bounds:
    left: int
    right: int
    top: int
    bottom: int


class CollisionDetection:
    """Hitbox that tests against obstacle and collectible grids and other hitboxes."""

    def __init__(self, box_x, box_y, height, width, cell_size, grid, collectibles) -> None:
        self.hitbox_x = int(box_x)
        self.hitbox_y = int(box_y)
        self.height = int(height)
        self.width = int(width)
        self.cell_size = int(cell_size)
        self.grid: Grid | None = grid
        self.collectibles: Grid | None = collectibles
        self.ring_sound = Sound(RING_SOUND)

    def _hit_points(self, grid: Grid, offset_x: float, offset_y: float) -> _HitPoints:
        size = self.cell_size
        x = self.hitbox_x + offset_x
        y = self.hitbox_y + offset_y
        half_h = self.height // 2

        def at(py: float, px: float) -> str:
            return grid[_cell(py, size)][_cell(px, size)]

        return _HitPoints(
            bottom_left=at(y + self.height, x),
            left_mid=at(y + half_h, x),
            right_mid=at(y + half_h, x + self.width),
            bottom_right=at(y + self.height, x + self.width),
            top_left=at(y, x),
            top_right=at(y, x + self.width),
            top_mid=at(y, x + self.width // 2),
        )

    def _center(self, offset_x: float, offset_y: float) -> tuple[int, int]:
        i = _cell(offset_y + self.hitbox_y + self.height // 2, self.cell_size)
        j = _cell(offset_x + self.hitbox_x + self.width // 2, self.cell_size)
        return i, j

    def _break_walls(self, offset_x: float, offset_y: float, step: int) -> None:
        grid = self.grid
        i, j = self._center(offset_x, offset_y)
        if grid[i][j] == BREAKABLE:
            grid[i][j] = EMPTY
        if grid[i][j + step] == BREAKABLE:
            grid[i][j + step] = EMPTY

    def detect_collision(self, offset_x, offset_y, flags: MovementFlags,
                         knuckles_active=False) -> MovementFlags:
        """Update ``flags`` for a hitbox placed at the given offset and return them."""
        if self.grid is None:
            raise ValueError("no obstacle grid attached")
        p = self._hit_points(self.grid, offset_x, offset_y)

        if p.bottom_left == WALL and p.left_mid == WALL:
            flags.move_left = False
        elif BREAKABLE in (p.bottom_left, p.left_mid):
            flags.move_left = False
            if knuckles_active:
                self._break_walls(offset_x, offset_y, -1)
        elif SPIKE in (p.bottom_left, p.left_mid) and not flags.on_spike:
            flags.move_left = False

        if p.bottom_right == WALL and p.right_mid == WALL:
            flags.move_right = False
        elif BREAKABLE in (p.bottom_right, p.right_mid):
            flags.move_right = False
            if knuckles_active:
                self._break_walls(offset_x, offset_y, 1)
        elif SPIKE in (p.bottom_right, p.right_mid) and not flags.on_spike:
            flags.move_right = False

        if PIT in (p.bottom_left, p.bottom_right):
            flags.pit_found = True
        if WALL in (p.top_right, p.top_left, p.top_mid):
            flags.move_up = False
        if p.top_mid == PLATFORM:
            flags.quick_jump = True
        flags.move_down = PLATFORM not in (p.bottom_left, p.bottom_right)
        return flags

    def check_item(self, offset_x, offset_y, volume) -> ItemPickup:
        """Collect any item under the hitbox centre and report what was taken."""
        if self.collectibles is None:
            raise ValueError("no collectibles grid attached")
        cells = self.collectibles
        p = self._hit_points(cells, offset_x, offset_y)
        i, j = self._center(offset_x, offset_y)
        groups = (
            (p.bottom_left, p.left_mid),
            (p.bottom_right, p.right_mid),
            (p.top_left, p.top_mid, p.top_right),
        )
        pickup = ItemPickup()
        for item in (RING, BOOST, HEALTH):
            for group in groups:
                if item not in group or cells[i][j] != item:
                    continue
                cells[i][j] = EMPTY
                if item == RING:
                    self.ring_sound.volume = volume
                    self.ring_sound.play()
                    pickup.rings += 1
                elif item == BOOST:
                    pickup.boost = True
                else:
                    pickup.health += 1
        return pickup

    def _bounds(self, x, y) -> _Bounds:
        x, y = int(x), int(y)
        return _Bounds(x - self.hitbox_x, x + self.hitbox_x,
                       y - self.hitbox_y, y + self.hitbox_y)

    def check_enemy(self, player: "CollisionDetection", player_x, player_y,
                    enemy_x, enemy_y) -> bool:
        """Whether the player's box overlaps this (enemy) box."""
        mine = player._bounds(player_x, player_y)
        theirs = self._bounds(enemy_x, enemy_y)
        return (mine.left < theirs.right and mine.right > theirs.left
                and mine.bottom > theirs.top and mine.top < theirs.bottom)