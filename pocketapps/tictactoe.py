"""A two-player tic-tac-toe game played on the terminal."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from collections.abc import Sequence
from enum import IntEnum

__all__ = ["GameState", "Board", "main"]

SIZE = 3
EMPTY = " "

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class GameState(IntEnum):
    """Outcome of inspecting a board."""

    DRAW = -1
    PLAYING = 0
    WIN = 1


class Board:
    """A 3x3 board addressed by ``(x, y)``, that is ``(column, row)``, from zero."""

    def __init__(self) -> None:
        self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]

    def __str__(self) -> str:
        return self.draw()

    def draw(self) -> str:
        """Render the board as text, framed by blank lines."""
        rows = [
            "".join(
                f" {self._cells[col][row]} {'|' if col < SIZE - 1 else ''}"
                for col in range(SIZE)
            )
            for row in range(SIZE)
        ]
        return "\n" + "\n-----------\n".join(rows) + "\n\n"

    def char_at(self, x: int, y: int) -> str | None:
        """The mark at ``(x, y)``, or None when the square is off the board."""
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            return None
        return self._cells[x][y]

    def is_move_legal(self, x: int, y: int) -> bool:
        """True when ``(x, y)`` is on the board and still empty."""
        return self.char_at(x, y) == EMPTY

    def move_xy(self, x: int, y: int, c: str) -> bool:
        """Place ``c`` at ``(x, y)`` if the move is legal; report whether it was."""
        if not self.is_move_legal(x, y):
            return False
        self._cells[x][y] = c
        return True

    def move(self, square: int, c: str) -> bool:
        """Place ``c`` on a square numbered 1-9, left to right and top to bottom."""
        if not 1 <= square <= SIZE * SIZE:
            return False
        x, y = (square - 1) % SIZE, (square - 1) // SIZE
        return self.move_xy(x, y, c)

    def _line_won(self, cells: Sequence[str]) -> bool:
        return cells[0] != EMPTY and all(cell == cells[0] for cell in cells)

    def state(self) -> GameState:
        """Whether somebody has won, the game is drawn, or play goes on."""
        c = self._cells
        lines = [list(column) for column in c]
        lines += [[c[col][row] for col in range(SIZE)] for row in range(SIZE)]
        lines.append([c[i][i] for i in range(SIZE)])
        lines.append([c[SIZE - 1 - i][i] for i in range(SIZE)])
        if any(self._line_won(line) for line in lines):
            return GameState.WIN
        if any(cell == EMPTY for column in c for cell in column):
            return GameState.PLAYING
        return GameState.DRAW


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _clear_screen() -> None:
    if not sys.stdout.isatty():
        return
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game, reading square numbers from standard input."""
    argparse.ArgumentParser(
        prog="tictactoe", description="Two-player tic-tac-toe."
    ).parse_args(argv)

    board = Board()
    turn = 0
    while True:
        player = "o" if turn % 2 else "x"
        _clear_screen()
        print(board.draw(), end="")

        state = board.state()
        if state is GameState.WIN:
            print("\nWinner!")
            return 0
        if state is GameState.DRAW:
            print("\nDraw!")
            return 0

        print(
            f"\n(turn #{turn}) To which square would you (player {player}) like to move? ",
            end="",
            flush=True,
        )
        line = sys.stdin.readline()
        if not line:
            return 1
        if board.move(_atoi(line), player):
            turn += 1
        print()


if __name__ == "__main__":
    sys.exit(main())