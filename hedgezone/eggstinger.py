"""The boss: patrols the top of the arena and stabs the floor beneath the player."""

from __future__ import annotations

import time
from itertools import islice
from typing import Callable

from hedgezone.collision import CollisionDetection, Grid
from hedgezone.enemies import CELL_SIZE, Flyer
from hedgezone.sprites import Clock, Sprite

BOSS_TEXTURE = "Sprites/boss_sprite.png"
SPIKE_TEXTURE = "Sprites/needle_sprite.png"

EGG_WIDTH = 145
EGG_HEIGHT = 130
SPIKE_WIDTH = 91
SPIKE_HEIGHT = 88

ARENA_WIDTH = 1200
PATROL_LIMIT = ARENA_WIDTH - EGG_WIDTH
PATROL_STEP = 2
DESCENT_STEP = 1
SPIKE_STEP = 2
REVERSE_Y = 100

STEP_WINDOW = 0.5
ATTACK_INTERVAL = 10.0
DELAY_SECONDS = 2.0

WALL = "w"
CLEARED = "\0"


def _div(value: int, size: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(value) // size
    return quotient if value >= 0 else -quotient


class EggStinger(Flyer):
    """Boss that patrols, locks onto the player's column and drives its spike down."""

    def __init__(self, x, y, clock_factory: Callable[[], Clock] = Clock,
                 sleep: Callable[[float], None] = time.sleep) -> None:
        super().__init__(20, 150.0, 100.0, x, y, 1200.0, 340.0, 10.0, False,
                         BOSS_TEXTURE, 1.0, 1.0, 24, 35)
        self.spike_sprite = Sprite(texture=SPIKE_TEXTURE)
        self.spike_x = int(self.x)
        self.spike_y = int(self.y)
        self.attack_clock = clock_factory()
        self.delay_clock = clock_factory()
        self.step_clock = clock_factory()
        self._sleep = sleep
        self.attacking = False
        self.patrol_right = True
        self.patrol_left = False
        self.moving_to_target = False
        self.finding_target = False
        self.reversing = False
        self.returned = False
        self.delayed = False
        self.target_x = 0
        self.target_y = 0
        self.reverse_y = REVERSE_Y
        self.spike_sprite.set_position((EGG_WIDTH - SPIKE_WIDTH) // 2,
                                       EGG_HEIGHT - SPIKE_HEIGHT)
        self.spike_cd = CollisionDetection(8, 5, SPIKE_HEIGHT, SPIKE_WIDTH,
                                           CELL_SIZE, None, None)

    @property
    def needle_sprite(self) -> Sprite:
        return self.spike_sprite

    def move(self, dt, target_x=0.0, target_y=0.0) -> None:
        """The boss moves only through its attack cycle in :meth:`update`."""

    def _window_open(self) -> bool:
        return self.step_clock.elapsed() < STEP_WINDOW

    def _place_spike(self) -> None:
        self.spike_x = int((EGG_WIDTH - SPIKE_WIDTH) // 2 + self.x - 10)
        self.spike_y = int((EGG_HEIGHT - SPIKE_HEIGHT) + self.y)
        self.spike_sprite.set_position(self.spike_x, self.spike_y)

    def _reset_cycle(self) -> None:
        self.attacking = False
        self.moving_to_target = False
        self.finding_target = False
        self.reversing = False
        self.returned = False
        self.delayed = False

    def update(self, dt, x, target_x=0.0, target_y=0.0, gravity=0.0,
               volume=0.0, grid: Grid | None = None) -> None:
        if self._window_open() and not self.attacking and not self.reversing:
            self.patrol()
            self._place_spike()
        elif not self.attacking and not self.reversing:
            self.step_clock.restart()

        if (self.attack_clock.elapsed() >= ATTACK_INTERVAL
                and not self.attacking and not self.reversing):
            self.attacking = True
            self.finding_target = True
            self.step_clock.restart()

        if self.attacking and self.finding_target and not self.reversing:
            self.find_player(target_x, grid)
            self.finding_target = False
            self.moving_to_target = True

        if (self._window_open() and self.attacking and self.moving_to_target
                and not self.reversing):
            self.move_toward(self.target_x)
            self._place_spike()
        else:
            self.step_clock.restart()

        if (self._window_open() and self.attacking and not self.moving_to_target
                and not self.reversing):
            if self.target_y != 0:
                self.attack_player(grid)
                self.spike_out()
            else:
                self._reset_cycle()
        else:
            self.step_clock.restart()

        if self.delayed:
            self.delay_clock.restart()
            while self.delay_clock.elapsed() < DELAY_SECONDS:
                self._sleep(DELAY_SECONDS - self.delay_clock.elapsed())
            self.sprite.set_position(self.x, self.y)
            self.spike_sprite.set_position(self.spike_x, self.spike_y)
            self.delayed = False

        if (self._window_open() and self.attacking and not self.moving_to_target
                and self.reversing):
            self.reverse_boss()
            self.spike_in()
        else:
            self.step_clock.restart()

        if self.returned:
            self.attack_clock.restart()
            self.returned = False

    def patrol(self) -> None:
        """Sweep left and right across the arena, turning at its edges."""
        if self.x < PATROL_LIMIT and self.patrol_right:
            self.x += PATROL_STEP
            self.sprite.set_position(self.x, self.y)
        elif self.x > PATROL_LIMIT:
            self.patrol_left = True
            self.patrol_right = False

        if self.x > 0 and self.patrol_left:
            self.x -= PATROL_STEP
            self.sprite.set_position(self.x, self.y)
        elif self.x <= 0:
            self.patrol_left = False
            self.patrol_right = True

    def move_toward(self, target_x) -> None:
        """Step horizontally toward ``target_x``; stop once exactly on it."""
        if self.x == target_x:
            self.moving_to_target = False
        elif self.x > target_x:
            self.x -= PATROL_STEP
            self.sprite.set_position(self.x, self.y)
        else:
            self.x += PATROL_STEP
            self.sprite.set_position(self.x, self.y)

    def find_player(self, player_x, grid: Grid | None) -> tuple[int, int]:
        """Lock onto the first wall row below the player's column; 0 if none."""
        if grid is None:
            raise ValueError("no level grid to search")
        self.target_x = int(player_x)
        column = _div(self.target_x, CELL_SIZE)
        for i, row in enumerate(islice(grid, int(self.height))):
            if row[column] == WALL:
                self.target_y = i * CELL_SIZE
                break
        else:
            self.target_y = 0
        return self.target_x, self.target_y

    def spike_out(self) -> None:
        """Extend the spike below the body."""
        if self.y + self.spike_y < EGG_HEIGHT + SPIKE_HEIGHT + self.y - 2:
            self.spike_y += SPIKE_STEP
        self.spike_sprite.set_position(self.spike_x, self.spike_y)

    def attack_player(self, grid: Grid | None) -> None:
        """Descend until the spike reaches the target row, then break the floor."""
        if self.spike_y + SPIKE_HEIGHT < self.target_y:
            self.y += DESCENT_STEP
            self.spike_y += DESCENT_STEP
        self.sprite.set_position(self.x, self.y)
        if self.spike_y + SPIKE_HEIGHT == self.target_y:
            if grid is None:
                raise ValueError("no level grid to strike")
            row = _div(self.target_y, CELL_SIZE)
            column = _div(self.target_x, CELL_SIZE) + 1
            grid[row][column] = CLEARED
            self.reversing = True
            self.delayed = True
            self.target_y = 0

    def reverse_boss(self) -> None:
        """Climb back to the patrol height, ending the attack once there."""
        if self.y > self.reverse_y:
            self.y -= DESCENT_STEP
        elif self.y == self.reverse_y:
            self.reversing = False
            self.moving_to_target = False
            self.finding_target = False
            self.attacking = False
            self.returned = True
        self.sprite.set_position(self.x, self.y)

    def spike_in(self) -> None:
        """Retract the spike into the body."""
        if self.spike_y > (EGG_HEIGHT - SPIKE_HEIGHT) + self.y:
            self.spike_y -= SPIKE_STEP
        self.spike_sprite.set_position(self.spike_x, self.spike_y)