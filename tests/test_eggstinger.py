import pytest

from hedgezone.eggstinger import (
    CLEARED,
    DELAY_SECONDS,
    PATROL_LIMIT,
    SPIKE_HEIGHT,
    SPIKE_TEXTURE,
    EggStinger,
)
from hedgezone.enemies import CELL_SIZE
from hedgezone.sprites import Clock


class FakeTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def boss(fake_time):
    return EggStinger(600, 100, clock_factory=lambda: Clock(fake_time),
                      sleep=fake_time.sleep)


def make_grid(wall_row=11, rows=14, cols=25):
    grid = [["e"] * cols for _ in range(rows)]
    grid[wall_row] = ["w"] * cols
    return grid


def test_boss_has_source_health_and_spike_sprite(boss):
    assert boss.health == 20
    assert boss.needle_sprite is boss.spike_sprite
    assert boss.needle_sprite.texture == SPIKE_TEXTURE


def test_patrol_moves_right_initially(boss):
    before = boss.x
    boss.patrol()
    assert boss.x > before
    assert boss.sprite.position == (boss.x, boss.y)


def test_patrol_turns_at_right_edge(boss):
    boss.x = float(PATROL_LIMIT + 1)
    boss.patrol()
    assert boss.patrol_left and not boss.patrol_right
    assert boss.x < PATROL_LIMIT + 1


def test_patrol_turns_at_left_edge(boss):
    boss.x = 0.0
    boss.patrol_right = False
    boss.patrol_left = True
    boss.patrol()
    assert boss.patrol_right and not boss.patrol_left


def test_move_toward_stops_on_target(boss):
    boss.x = 300.0
    boss.moving_to_target = True
    boss.move_toward(300)
    assert boss.moving_to_target is False
    assert boss.x == 300.0


def test_move_toward_approaches(boss):
    boss.x = 300.0
    boss.move_toward(100)
    assert boss.x < 300.0
    boss.x = 300.0
    boss.move_toward(500)
    assert boss.x > 300.0


def test_find_player_locates_wall_row(boss):
    grid = make_grid(wall_row=11)
    tx, ty = boss.find_player(640.0, grid)
    assert tx == 640
    assert ty == 11 * CELL_SIZE
    assert (boss.target_x, boss.target_y) == (tx, ty)


def test_find_player_without_wall_gives_zero(boss):
    grid = [["e"] * 25 for _ in range(14)]
    assert boss.find_player(640.0, grid)[1] == 0


def test_find_player_requires_grid(boss):
    with pytest.raises(ValueError):
        boss.find_player(640.0, None)


def test_attack_player_descends_toward_target(boss):
    boss.target_x = 640
    boss.target_y = 11 * CELL_SIZE
    boss.spike_y = 0
    y_before = boss.y
    boss.attack_player(make_grid())
    assert boss.y > y_before
    assert boss.reversing is False


def test_attack_player_breaks_floor_on_contact(boss):
    grid = make_grid(wall_row=11)
    boss.target_x = 640
    boss.target_y = 11 * CELL_SIZE
    boss.spike_y = boss.target_y - SPIKE_HEIGHT
    boss.attack_player(grid)
    assert grid[11][640 // CELL_SIZE + 1] == CLEARED
    assert boss.reversing and boss.delayed
    assert boss.target_y == 0


def test_spike_out_and_in_are_opposite(boss):
    boss.spike_y = int(boss.y)
    start = boss.spike_y
    boss.spike_out()
    assert boss.spike_y > start
    boss.spike_y = int(boss.y) + 200
    high = boss.spike_y
    boss.spike_in()
    assert boss.spike_y < high
    assert boss.spike_sprite.position == (boss.spike_x, boss.spike_y)


def test_reverse_boss_climbs_then_finishes(boss):
    boss.attacking = True
    boss.reversing = True
    boss.y = float(boss.reverse_y + 1)
    boss.reverse_boss()
    assert boss.y == boss.reverse_y
    assert boss.reversing
    boss.reverse_boss()
    assert not boss.reversing and not boss.attacking
    assert boss.returned


def test_update_patrols_before_attack(boss):
    before = boss.x
    boss.update(0.016, 0.0, 640.0, 500.0, 1.0, 30.0, make_grid())
    assert boss.x > before
    assert boss.attacking is False


def test_update_starts_attack_after_interval(boss, fake_time):
    fake_time.now = 10.0
    boss.update(0.016, 0.0, 640.0, 500.0, 1.0, 30.0, make_grid(wall_row=11))
    assert boss.attacking
    assert boss.target_x == 640
    assert boss.target_y == 11 * CELL_SIZE


def test_update_waits_during_delay(boss, fake_time):
    boss.delayed = True
    boss.update(0.016, 0.0, 640.0, 500.0, 1.0, 30.0, make_grid())
    assert fake_time.now >= DELAY_SECONDS
    assert boss.delayed is False