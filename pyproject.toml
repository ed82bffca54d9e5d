[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consoletasks"
version = "0.1.0"
description = "Small interactive console programs: number guessing, calculator, tic-tac-toe, to-do list and a library manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "games", "tic-tac-toe", "todo", "library", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
guessing-game = "consoletasks.guessing:main"
calculator = "consoletasks.calculator:main"
tictactoe = "consoletasks.tictactoe:main"
todo = "consoletasks.todo:main"
library = "consoletasks.library:main"

[tool.hatch.build.targets.wheel]
packages = ["consoletasks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
