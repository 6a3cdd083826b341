[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hedgezone"
version = "0.1.0"
description = "Game logic for a tile-based side-scrolling platformer: collision grids, camera, collectibles, enemies, boss and HUD state."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scroller", "collision", "tile-grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hedgezone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
