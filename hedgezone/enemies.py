"""Enemy behaviour: health, patrol and chase movement, and projectiles."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hedgezone.collision import CollisionDetection, Grid
from hedgezone.sprites import Clock, Sound, Sprite

CELL_SIZE = 64
SHOOT_SOUND = "Sprites/Sounds/Global/Explosion.wav"
PROJECTILE_TEXTURE = "Sprites/projectile_sprite.png"
PROJECTILE_SCALE = 3.0
BLUE = (0, 0, 255)

CHASE_RANGE = 600.0
HEARING_RANGE = 1200.0
BEEBOT_PROJECTILE_SPEED = 150.0
CRABMEAT_PROJECTILE_SPEED_X = 150.0
CRABMEAT_LAUNCH_SPEED_Y = -200.0
GRAVITY_SCALE = 98.0


class Enemy(ABC):
    """Common state of every enemy: position, speed, size, health and sprites."""

    def __init__(self, hp, speed_x, speed_y, x, y, displacement_x, displacement_y,
                 cooldown, shoots, texture, scale_x, scale_y, image_x, image_y) -> None:
        self.health = int(hp)
        self.speed_x = float(speed_x)
        self.speed_y = float(speed_y)
        self.x = float(x)
        self.y = float(y)
        self.width = image_x * scale_x
        self.height = image_y * scale_y
        self.displacement_x = float(displacement_x)
        self.displacement_y = float(displacement_y)
        self.dx = 0.0
        self.dy = 0.0
        self.scale_x = float(scale_x)
        self.scale_y = float(scale_y)
        self.enemy_width = self.scale_x * image_x
        self.enemy_height = self.scale_y * image_y
        self.attack_cooldown = float(cooldown)
        self.shoots_projectiles = bool(shoots)
        self.projectile_active = False
        self.projectile_x = self.x
        self.projectile_y = self.y
        self.active = True
        # The hitbox receives the scaled width where it expects a height, and
        # vice versa, matching how enemy boxes have always been laid out.
        self.cd = CollisionDetection(8 * abs(scale_x), 5 * abs(scale_y),
                                     self.width, self.height, CELL_SIZE, None, None)
        self.sprite = Sprite(texture=texture)
        self.sprite.set_scale(self.scale_x, self.scale_y)
        self.sprite.set_position(self.x, self.y)
        self.projectile_sprite = Sprite()

    def dec_health(self) -> None:
        """Lose one point of health, never dropping below zero."""
        if self.health - 1 >= 0:
            self.health -= 1

    @property
    def needle_sprite(self) -> Sprite:
        """The sprite that harms the player on contact."""
        return self.sprite

    @abstractmethod
    def move(self, dt, target_x=0.0, target_y=0.0) -> None:
        """Advance the enemy's position by ``dt`` seconds."""

    @abstractmethod
    def update(self, dt, x, target_x=0.0, target_y=0.0, gravity=0.0,
               volume=0.0, grid: Grid | None = None) -> None:
        """Run one frame; ``x`` is the enemy's on-screen horizontal position."""


class Crawler(Enemy, ABC):
    """An enemy that walks along the ground."""


class Flyer(Enemy, ABC):
    """An enemy that moves through the air."""


class _Shooter:
    """Mixin setting up the projectile clock, sprite and firing sound."""

    def _init_projectile(self, clock: Clock | None) -> None:
        self.projectile_clock = clock if clock is not None else Clock()
        self.projectile_sprite = Sprite(texture=PROJECTILE_TEXTURE)
        self.projectile_sprite.set_scale(PROJECTILE_SCALE, PROJECTILE_SCALE)
        self.projectile_sprite.set_position(self.x, self.y)
        self.projectile_clock.restart()
        self.shoot_sound = Sound(SHOOT_SOUND)

    def _fire(self, target_x: float, volume: float) -> None:
        if abs(self.x - target_x) <= HEARING_RANGE:
            self.shoot_sound.volume = volume
            self.shoot_sound.play()
        self.projectile_x = self.x
        self.projectile_y = self.y
        self.projectile_clock.restart()


class BatBrain(Flyer):
    """Bat that homes in on the player."""

    def __init__(self, x, y) -> None:
        super().__init__(1, 150.0, 100.0, x, y, 0, 0, 0.0, False,
                         "Sprites/batbrain_sprite.png", -2.5, 2.5, 32, 30)

    def move(self, dt, target_x=0.0, target_y=0.0) -> None:
        # Only a target too far to the right is out of reach.
        if target_x - self.x > CHASE_RANGE:
            return
        if target_x < self.x:
            self.x -= self.speed_x * dt
        elif target_x > self.x:
            self.x += self.speed_x * dt

        if self.y < target_y:
            self.y += self.speed_y * dt
        elif self.y > target_y:
            self.y -= self.speed_y * dt

    def update(self, dt, x, target_x=0.0, target_y=0.0, gravity=0.0,
               volume=0.0, grid=None) -> None:
        self.move(dt, target_x, target_y)
        self.sprite.set_position(x, self.y)


class BeeBot(_Shooter, Flyer):
    """Bee that zig-zags and fires diagonal shots on a cooldown."""

    def __init__(self, x, y, clock: Clock | None = None) -> None:
        super().__init__(1, 150.0, 100.0, x, y, 200.0, 200.0, 5.0, True,
                         "Sprites/beebot_sprite.png", 2.5, 2.5, 45, 19)
        self.moving_left = False
        self.moving_down = True
        self._init_projectile(clock)

    def move(self, dt, target_x=0.0, target_y=0.0) -> None:
        step_x = self.speed_x * dt
        step_y = self.speed_y * dt
        self.x += -step_x if self.moving_left else step_x
        self.y += step_y if self.moving_down else -step_y

        self.dx += step_x
        self.dy += step_y
        if self.dx >= self.displacement_x * 4:
            self.dx = 0.0
            self.moving_left = not self.moving_left
        if self.dy >= self.displacement_y:
            self.dy = 0.0
            self.moving_down = not self.moving_down

    def shoot_projectile(self, dt, x, target_x, volume) -> None:
        """Fire a new shot once the cooldown has passed, else move the current one."""
        if self.projectile_clock.elapsed() > self.attack_cooldown:
            self._fire(target_x, volume)
        else:
            self.projectile_x += BEEBOT_PROJECTILE_SPEED * dt
            self.projectile_y += BEEBOT_PROJECTILE_SPEED * dt

    def update(self, dt, x, target_x=0.0, target_y=0.0, gravity=0.0,
               volume=0.0, grid=None) -> None:
        self.move(dt)
        self.shoot_projectile(dt, x, target_x, volume)
        self.sprite.set_position(x, self.y)


class CrabMeat(_Shooter, Crawler):
    """Crab that paces left and right and lobs shots in an arc."""

    def __init__(self, x, y, clock: Clock | None = None) -> None:
        super().__init__(1, 150.0, 0.0, x, y, 200.0, 0.0, 10.0, True,
                         "Sprites/crabmeat_sprite.png", 2.5, 2.5, 42, 31)
        self.moving_left = True
        self.projectile_speed_x = CRABMEAT_PROJECTILE_SPEED_X
        self.projectile_speed_y = 0.0
        self._init_projectile(clock)
        self.projectile_sprite.color = BLUE

    def move(self, dt, target_x=0.0, target_y=0.0) -> None:
        step = self.speed_x * dt
        self.x += -step if self.moving_left else step
        self.dx += step
        if self.dx >= self.displacement_x:
            self.dx = 0.0
            self.moving_left = not self.moving_left

    def shoot_projectile(self, dt, x, target_x, gravity, volume) -> None:
        """Launch a shot once the cooldown has passed, else follow its arc."""
        if self.projectile_clock.elapsed() > self.attack_cooldown:
            self._fire(target_x, volume)
            self.projectile_speed_y = CRABMEAT_LAUNCH_SPEED_Y
        else:
            self.projectile_speed_y += gravity * GRAVITY_SCALE * dt
            self.projectile_x += self.projectile_speed_x * dt
            self.projectile_y += self.projectile_speed_y * dt

    def update(self, dt, x, target_x=0.0, target_y=0.0, gravity=0.0,
               volume=0.0, grid=None) -> None:
        self.move(dt, target_x)
        self.shoot_projectile(dt, x, target_x, gravity, volume)
        self.sprite.set_position(x, self.y)