[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nightcrawl"
version = "0.1.0"
description = "Game logic for a side-scrolling castle action game: collisions, tile maps, animations, weapons and a player character."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scroller", "collision", "tilemap", "aabb"]
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
packages = ["nightcrawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
