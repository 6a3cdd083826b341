"""Heads-up display: time, score, rings, hearts and status lines."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from hedgezone.sprites import Sprite

HEART_TEXTURE = "Sprites/heart_sprite.png"
RING_TEXTURE = "Sprites/ring_sprite.png"
FONT = "Fonts/PressStart2P-Regular.ttf"
TEXT_SIZE = 25

Color = tuple[int, int, int]
WHITE: Color = (255, 255, 255)
YELLOW: Color = (255, 255, 0)
BLUE: Color = (0, 0, 255)
RED: Color = (255, 0, 0)
MAGENTA: Color = (255, 0, 255)

HEART_X = 25
HEART_SPACING = 30
HEART_Y = 140

_ACTIVE = {
    0: ("Sonic is Active", BLUE),
    1: ("Tails is Active", YELLOW),
    2: ("Knuckles is Active", RED),
}
_BOOST = {0: "+4 Speed", 1: "+4s Flight"}


@dataclass
class HudText:
    """A line of HUD text with its colour, position and size."""

    text: str = ""
    color: Color = WHITE
    position: tuple[float, float] = (0.0, 0.0)
    size: int = TEXT_SIZE


@dataclass
class HudFrame:
    """Everything the HUD draws for one frame."""

    hearts: list[tuple[float, float]]
    ring_icon: Sprite
    time: HudText
    score: HudText
    rings: HudText
    active: HudText
    invincible: HudText | None = None
    boost: HudText | None = None

    @property
    def texts(self) -> list[HudText]:
        """Text lines in drawing order."""
        lines = [self.time, self.score, self.rings, self.active]
        lines += [t for t in (self.invincible, self.boost) if t is not None]
        return lines


@dataclass
class HUD:
    """Builds the HUD frame from the level's current state."""

    font: str = FONT
    heart_sprite: Sprite = field(default_factory=lambda: Sprite(HEART_TEXTURE, scale=(0.75, 0.75)))
    ring_icon: Sprite = field(
        default_factory=lambda: Sprite(RING_TEXTURE, position=(25.0, 90.0), scale=(0.75, 0.75)))
    time_text: HudText = field(default_factory=lambda: HudText(color=YELLOW, position=(30, 30)))
    score_text: HudText = field(default_factory=lambda: HudText(color=YELLOW, position=(30, 60)))
    ring_text: HudText = field(default_factory=lambda: HudText(color=YELLOW, position=(90, 97)))
    invincible_text: HudText = field(
        default_factory=lambda: HudText("Invincibility", WHITE, (25, 850)))
    active_text: HudText = field(default_factory=lambda: HudText(position=(25, 800)))
    boost_text: HudText = field(default_factory=lambda: HudText(color=MAGENTA, position=(950, 800)))

    def update(self, score, time_elapsed, health, rings, invincible, level_time,
               active_index, boost_active) -> HudFrame:
        """Refresh the HUD lines and return what to draw this frame."""
        self.time_text.text = f"Time:{int(level_time - time_elapsed)}"
        self.score_text.text = f"Score:{score}"
        self.ring_text.text = f":{rings}"
        hearts = [(float(HEART_X + i * HEART_SPACING), float(HEART_Y))
                  for i in range(max(int(health), 0))]

        if active_index in _ACTIVE:
            self.active_text.text, self.active_text.color = _ACTIVE[active_index]
        if boost_active and active_index in _BOOST:
            self.boost_text.text = _BOOST[active_index]

        show_boost = boost_active and active_index != 2
        return HudFrame(
            hearts=hearts,
            ring_icon=replace(self.ring_icon),
            time=replace(self.time_text),
            score=replace(self.score_text),
            rings=replace(self.ring_text),
            active=replace(self.active_text),
            invincible=replace(self.invincible_text) if invincible else None,
            boost=replace(self.boost_text) if show_boost else None,
        )