[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inkgames"
version = "0.1.0"
description = "Game logic for small grid puzzle games: Diptych worlds and rooms, Minesweeper, Solitaire, Game of Life, Snake and Sudoku"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "games",
    "puzzle",
    "diptych",
    "minesweeper",
    "solitaire",
    "sudoku",
    "snake",
    "game-of-life",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inkgames"]

[tool.hatch.build.targets.sdist]
include = ["inkgames", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
