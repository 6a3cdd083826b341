"""Collectible items placed in a level."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from hedgezone.sprites import Sprite


@dataclass
class Collectible:
    """An item at integer grid-pixel coordinates with its sprite."""

    texture: ClassVar[str | None] = None

    x: int
    y: int
    sprite: Sprite = field(init=False)

    def __post_init__(self) -> None:
        self.x = int(self.x)
        self.y = int(self.y)
        self.sprite = Sprite(texture=self.texture)


@dataclass
class Boost(Collectible):
    """Power-up granting a character-specific boost."""

    texture: ClassVar[str | None] = "Sprites/boost_sprite.png"


@dataclass
class Health(Collectible):
    """Extra heart."""

    texture: ClassVar[str | None] = "Sprites/heart_sprite.png"


_KINDS: dict[str, type[Collectible]] = {"boost": Boost, "health": Health}


def create_collectible(kind: str, x: float, y: float) -> Collectible:
    """Build a collectible of the named kind ("boost" or "health")."""
    try:
        cls = _KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown collectible kind: {kind!r}") from None
    return cls(x, y)