"""Game logic for a tile-based side-scrolling platformer: collision, camera, items, enemies, boss and HUD."""

__version__ = "0.1.0"