import pytest

from hedgezone.camera import VIEW_HEIGHT, VIEW_WIDTH, Camera
from hedgezone.sprites import Sprite


def _camera():
    return Camera([0, 1200], [1200, 2400], [Sprite(), Sprite()])


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        Camera([0, 1200], [1200], [Sprite(), Sprite()])


def test_empty_raises():
    with pytest.raises(ValueError):
        Camera([], [], [])


def test_position_is_clamped():
    cam = _camera()
    cam.run(-50)
    assert cam.camera_pos == 0.0
    cam.run(99999)
    assert cam.camera_pos == 2400 - VIEW_WIDTH


def test_first_chunk_drawn_with_offset():
    cam = _camera()
    views = cam.run(600)
    assert views[0].index == 0
    assert views[0].texture_rect.left == 600
    assert views[0].texture_rect.width == VIEW_WIDTH
    assert views[0].texture_rect.height == VIEW_HEIGHT
    assert views[0].position == (0.0, 0.0)
    assert cam.chunks[0].texture_rect == views[0].texture_rect


def test_overlap_places_next_chunk():
    cam = _camera()
    views = cam.run(600)
    assert [v.index for v in views] == [0, 1]
    assert views[1].position == (1200 - 600, 0.0)
    assert views[1].texture_rect.left == 0


def test_world_to_window_centres_camera():
    cam = _camera()
    cam.run(600)
    assert cam.world_to_window(600) == VIEW_WIDTH / 2
    assert cam.world_to_window(700) - cam.world_to_window(600) == 100