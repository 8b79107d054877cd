[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketapps"
version = "0.1.0"
description = "A handful of small terminal programs: a todo list, tic-tac-toe, a curses tetris and a sorting benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tetris", "tic-tac-toe", "sorting", "terminal", "games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
todo = "pocketapps.todo_cli:main"
tictactoe = "pocketapps.tictactoe:main"
tetris = "pocketapps.tetris_screen:main"
sortbench = "pocketapps.sortbench:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketapps"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
