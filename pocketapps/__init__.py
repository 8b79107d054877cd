"""Small terminal programs: a todo list, tic-tac-toe, tetris and a sorting benchmark."""

__version__ = "0.1.0"