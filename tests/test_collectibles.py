import pytest

from hedgezone.collectibles import Boost, Health, create_collectible


def test_create_boost():
    item = create_collectible("boost", 3, 4)
    assert isinstance(item, Boost)
    assert (item.x, item.y) == (3, 4)
    assert item.sprite.texture == Boost.texture


def test_create_health():
    item = create_collectible("health", 7, 9)
    assert isinstance(item, Health)
    assert item.sprite.texture == "Sprites/heart_sprite.png"


def test_coordinates_truncate_to_int():
    item = create_collectible("health", 3.7, 2.2)
    assert (item.x, item.y) == (3, 2)


def test_coordinates_can_be_reassigned():
    item = Boost(1, 2)
    item.x = 10
    item.y = 20
    assert (item.x, item.y) == (10, 20)


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        create_collectible("ring", 0, 0)


def test_each_item_has_own_sprite():
    a = create_collectible("boost", 0, 0)
    b = create_collectible("boost", 0, 0)
    a.sprite.set_position(5, 5)
    assert b.sprite.position == (0.0, 0.0)