[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "overengineered"
version = "0.1.0"
description = "Game data layer for a terminal side-scrolling platformer: settings, maps, sceneries, pawns and scoreboards."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "terminal", "csv", "assets"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["overengineered"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
