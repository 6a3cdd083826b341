# hedgezone

This package holds the game logic of a tile-based side-scrolling platformer.
No rendering or audio backend is attached. Sprites, sounds and clocks are
plain Python objects that record state: positions, texture regions, volumes
and play counts. Any front end can read that state and draw or play it.

## Modules

### `hedgezone.sprites`

- `Rect` is an integer texture region.
- `Sprite` holds a texture name, position, scale, texture rect and tint.
  Its methods are `set_position(x, y)` and `set_scale(sx, sy)`.
- `Clock(time_source=time.monotonic)` provides:
  - `elapsed()`, the seconds since the last restart.
  - `restart()`, which resets the clock and returns the time that passed.
- `Sound(buffer)` has a `volume` and counts how often `play()` was called
  in `plays`.
- `Animations(clock=None)` steps the running frames, each 40×40, of two
  sprite sheets.
  - `run_right(sprite)` and `run_left(sprite)` advance one frame only when
    more than 1/60 s has passed.
  - They return `True` if the frame changed.

### `hedgezone.collision`

`CollisionDetection(box_x, box_y, height, width, cell_size, grid, collectibles)`
checks a hitbox against grids of one-character cells (lists of lists of str).

Obstacle grid cells:

| Cell | Meaning |
|------|---------|
| `'w'` | wall |
| `'b'` | breakable wall |
| `'s'` | spike |
| `'p'` | platform |
| `'h'` | pit |
| `'e'` | empty |

Collectibles grid cells:

| Cell | Meaning |
|------|---------|
| `'r'` | ring |
| `'b'` | boost |
| `'h'` | health |
| `'e'` | empty |

Methods:

- `detect_collision(offset_x, offset_y, flags, knuckles_active=False)`
  - Updates the given `MovementFlags` and returns them. The flags are
    `move_right`, `move_left`, `move_up`, `move_down`, `on_spike`,
    `quick_jump` and `pit_found`.
  - When `knuckles_active` is true, breakable walls beside the hitbox are
    cleared to `'e'`.
- `check_item(offset_x, offset_y, volume)`
  - Removes the item under the hitbox centre.
  - Returns an `ItemPickup` with `rings`, `health` and `boost`.
  - Plays `ring_sound` for each ring taken.
- `check_enemy(player, player_x, player_y, enemy_x, enemy_y)`
  - Tells whether the two boxes overlap.

Both grid methods raise `ValueError` when the needed grid is `None`.

### `hedgezone.camera`

`Camera(left, right, chunks)` follows the player across a row of background
chunks. The view is 1200×896 pixels.

- `run(player_pos)` moves the camera and returns the `ChunkView` values to
  draw, in order.
  - The camera position is clamped to `[0, right[-1] - 1200]`.
  - When the view spans two chunks, two views are returned.
- `world_to_window(x)` maps a world x coordinate to a window x coordinate.
- Lists that are empty or of unequal length raise `ValueError`.

### `hedgezone.collectibles`

- `Collectible` is the base class; `Boost` and `Health` are its kinds.
- Each holds integer `x`, `y` and a `sprite`.
- `create_collectible(kind, x, y)` builds one:
  - `kind` is `"boost"` or `"health"`.
  - Any other kind raises `ValueError`.

### `hedgezone.enemies`

`Enemy` is the abstract base. It has:

- `health` and `dec_health()`, which never goes below zero.
- Position, size, projectile fields and a `cd` hitbox.
- `needle_sprite`, the sprite that harms the player on contact.

`Crawler` and `Flyer` mark the two families of enemy. The concrete enemies
are:

- `BatBrain` drifts toward the target at 150 px/s horizontally and 100 px/s
  vertically.
- `BeeBot(x, y, clock=None)` zig-zags.
  - `shoot_projectile(dt, x, target_x, volume)` fires every 5 s.
  - Between shots the projectile moves diagonally at 150 px/s.
- `CrabMeat(x, y, clock=None)` paces 200 px each way.
  - `shoot_projectile(dt, x, target_x, gravity, volume)` fires every 10 s.
  - Each shot follows an arc.
- Shot sounds play only when the target is within 1200 px.

Every enemy has `move(dt, target_x, target_y)` and
`update(dt, x, target_x, target_y, gravity, volume, grid)`.

### `hedgezone.eggstinger`

`EggStinger(x, y, clock_factory=Clock, sleep=time.sleep)` is the boss, with
20 health. Its cycle runs as follows:

1. It patrols the top of a 1200 px arena.
2. Every 10 s it locks onto the player's column with
   `find_player(player_x, grid)`.
3. It moves there with `move_toward(target_x)`.
4. It descends with `attack_player(grid)` until its spike reaches the first
   wall row.
5. It clears the floor cell next to the target in the grid.
6. It waits 2 s.
7. It climbs back with `reverse_boss()`.

`spike_out()` and `spike_in()` move the spike. `update(...)` drives the whole
cycle.

### `hedgezone.factories`

- `EnemyKind` is an enum with `BATBRAIN`, `BEEBOT`, `CRABMEAT` and
  `EGGSTINGER`.
  - Its `enemy_class` and `family` properties give the class and the
    family (`Crawler` or `Flyer`).
- `create_enemy(kind, x, y)` accepts an `EnemyKind` or its string value.
  An unknown kind raises `ValueError`.

### `hedgezone.hud`

`HUD().update(...)` takes `score`, `time_elapsed`, `health`, `rings`,
`invincible`, `level_time`, `active_index` and `boost_active`. It returns a
`HudFrame` holding:

- the heart positions;
- the ring icon;
- `HudText` lines for time, score, rings and the active character;
- the invincibility line, if `invincible` is true;
- the boost line, if a boost is active and `active_index` is not 2.

`frame.texts` lists the lines in drawing order.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from hedgezone.collision import CollisionDetection, MovementFlags
from hedgezone.factories import create_enemy
from hedgezone.hud import HUD

grid = [list("eeee"), list("eeee"), list("wwww")]
items = [list("eeee"), list("eree"), list("eeee")]
cd = CollisionDetection(0, 0, 40, 40, 64, grid, items)

flags = cd.detect_collision(10, 80, MovementFlags(), False)
pickup = cd.check_item(70, 70, volume=30)   # pickup.rings == 1

crab = create_enemy("crabmeat", 400.0, 600.0)
crab.update(1 / 60, 400.0, target_x=300.0, gravity=1.0, volume=30)

frame = HUD().update(1200, 30.5, 3, pickup.rings, False, 120, 0, True)
print([t.text for t in frame.texts])
# ['Time:89', 'Score:1200', ':1', 'Sonic is Active', '+4 Speed']
```

## What it does not do

This package has no window, drawing, audio playback or keyboard input. It
has no playable characters, no level definitions and no game loop. It also
has no menus, scoreboard or save files, and no command to start a game.
Those have to be built on top of the state these classes expose.