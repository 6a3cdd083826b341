"""Construction of enemies by kind."""

from __future__ import annotations

from enum import Enum

from hedgezone.eggstinger import EggStinger
from hedgezone.enemies import BatBrain, BeeBot, CrabMeat, Crawler, Enemy, Flyer


class EnemyKind(str, Enum):
    """The enemies a level can place."""

    BATBRAIN = "batbrain"
    BEEBOT = "beebot"
    CRABMEAT = "crabmeat"
    EGGSTINGER = "eggstinger"

    @property
    def enemy_class(self) -> type[Enemy]:
        return _CLASSES[self]

    @property
    def family(self) -> type[Enemy]:
        """Crawler or Flyer, the family the enemy belongs to."""
        return Flyer if issubclass(self.enemy_class, Flyer) else Crawler


_CLASSES: dict[EnemyKind, type[Enemy]] = {
    EnemyKind.BATBRAIN: BatBrain,
    EnemyKind.BEEBOT: BeeBot,
    EnemyKind.CRABMEAT: CrabMeat,
    EnemyKind.EGGSTINGER: EggStinger,
}


def create_enemy(kind: EnemyKind | str, x: float, y: float) -> Enemy:
    """Build an enemy of ``kind`` at world position (x, y)."""
    try:
        resolved = EnemyKind(kind)
    except ValueError:
        raise ValueError(f"unknown enemy kind: {kind!r}") from None
    return resolved.enemy_class(x, y)