import pytest

from hedgezone.sprites import Animations, Clock, Rect, Sound, Sprite


class _FakeTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def fake_time():
    return _FakeTime()


def test_clock_elapsed_and_restart(fake_time):
    clock = Clock(fake_time)
    fake_time.now = 2.5
    assert clock.elapsed() == 2.5
    assert clock.restart() == 2.5
    assert clock.elapsed() == 0.0


def test_sprite_setters():
    sprite = Sprite()
    sprite.set_position(3, 4)
    sprite.set_scale(2, 2)
    assert sprite.position == (3.0, 4.0)
    assert sprite.scale == (2.0, 2.0)


def test_sound_counts_plays():
    sound = Sound("ring.wav")
    sound.play()
    sound.play()
    assert sound.plays == 2


def test_run_right_waits_for_frame_interval(fake_time):
    anim = Animations(Clock(fake_time))
    sprite = Sprite()
    assert anim.run_right(sprite) is False
    assert sprite.texture_rect is None


def test_run_right_advances_and_wraps(fake_time):
    anim = Animations(Clock(fake_time))
    sprite = Sprite()
    fake_time.now += 0.1
    assert anim.run_right(sprite) is True
    assert sprite.texture == Animations.RIGHT_TEXTURE
    assert sprite.texture_rect == Rect(40, 0, 40, 40)
    for _ in range(10):
        fake_time.now += 0.1
        anim.run_right(sprite)
    assert sprite.texture_rect.left == 440
    fake_time.now += 0.1
    anim.run_right(sprite)
    assert sprite.texture_rect.left == 0


def test_run_left_advances_and_wraps(fake_time):
    anim = Animations(Clock(fake_time))
    sprite = Sprite()
    fake_time.now += 0.1
    anim.run_left(sprite)
    assert sprite.texture == Animations.LEFT_TEXTURE
    assert sprite.texture_rect.left == 400
    for _ in range(10):
        fake_time.now += 0.1
        anim.run_left(sprite)
    assert sprite.texture_rect.left == 0
    fake_time.now += 0.1
    anim.run_left(sprite)
    assert sprite.texture_rect.left == 440


def test_frame_resets_clock(fake_time):
    clock = Clock(fake_time)
    anim = Animations(clock)
    fake_time.now = 1.0
    anim.run_right(Sprite())
    assert clock.elapsed() == 0.0