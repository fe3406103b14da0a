[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictactoe"
version = "1.0.0"
description = "Console tic-tac-toe with human and computer players of three difficulty levels"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "game", "minimax", "alpha-beta", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tictactoe = "tictactoe.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["tictactoe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
