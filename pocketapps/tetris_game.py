"""The rules of tetris: falling pieces, collisions, line removal and scoring."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from pocketapps.tetris_pieces import Piece, Rotation, _RandRange, random_piece, shape
from pocketapps.tetris_score import ScoreBoard

__all__ = ["WIDTH", "HEIGHT", "Game"]

WIDTH = 10
HEIGHT = 22

POINTS_PER_LINES = (1, 40, 100, 300, 1200)
SCORE_PER_LEVEL = 700
BASE_DELAY_MS = 800
DELAY_FACTOR = 0.9
FIXED_ROWS = 3  # rows at the very top are never shifted by line removal


class Game:
    """A game board of ``HEIGHT`` rows by ``WIDTH`` columns.

    ``cells[row][column]`` is 0 for an empty cell, or one more than the
    kind of the piece that filled it. Row 0 is at the top.
    """

    def __init__(
        self,
        rng: _RandRange | None = None,
        scores: ScoreBoard | None = None,
        on_game_over: Callable[[Game], None] | None = None,
    ) -> None:
        self.rng = rng
        self.scores = scores if scores is not None else ScoreBoard()
        self.on_game_over = on_game_over
        self.delay = 0
        self.over = False
        self.cells: list[list[int]] = []
        self.current: Piece = random_piece(rng)
        self.upcoming: Piece = random_piece(rng)
        self.start_new_game()

    @property
    def score(self) -> int:
        return self.scores.score

    @property
    def level(self) -> int:
        return self.scores.level

    def _footprint(self) -> Iterator[tuple[int, int]]:
        piece = self.current
        for dy, row in enumerate(shape(piece.kind, piece.rotation)):
            for dx, filled in enumerate(row):
                if filled:
                    yield piece.y - dy, piece.x + dx

    def _place(self, value: int) -> None:
        for y, x in self._footprint():
            self.cells[y][x] = value

    def _add_current(self) -> None:
        self._place(self.current.kind + 1)

    def _remove_current(self) -> None:
        self._place(0)

    def _overlaps(self) -> bool:
        return any(
            not (0 <= y < HEIGHT and 0 <= x < WIDTH) or self.cells[y][x]
            for y, x in self._footprint()
        )

    def start_new_game(self) -> None:
        """Clear the board, reset score and level, and drop a fresh piece."""
        self.cells = [[0] * WIDTH for _ in range(HEIGHT)]
        self.current = random_piece(self.rng)
        self.upcoming = random_piece(self.rng)
        self.scores.score = 0
        self.scores.level = 1
        self.over = False
        self._add_current()

    def _eliminate_lines(self) -> int:
        lines = 0
        for y in range(HEIGHT):
            if not all(self.cells[y]):
                continue
            for h in range(y, FIXED_ROWS - 1, -1):
                self.cells[h] = list(self.cells[h - 1])
            lines += 1
        return POINTS_PER_LINES[min(lines, len(POINTS_PER_LINES) - 1)]

    def _piece_landed(self) -> None:
        self.scores.score += self._eliminate_lines()
        self.scores.level = 1 + self.scores.score // SCORE_PER_LEVEL

        self.current = self.upcoming
        self.upcoming = random_piece(self.rng)

        if self._overlaps():
            self.over = True
            if self.on_game_over is not None:
                self.on_game_over(self)
            return
        self._add_current()

    def _step_down(self) -> bool:
        """Move one row down; return True when the piece has hit bottom."""
        self._remove_current()
        self.current.y += 1
        bottom = self._overlaps()
        if bottom:
            self.current.y -= 1
        self._add_current()
        self.delay = int(BASE_DELAY_MS * DELAY_FACTOR ** self.level)
        return bottom

    def move_down(self) -> None:
        """Move the piece one row down, landing it if it cannot go further."""
        if self._step_down():
            self._piece_landed()

    def move_bottom(self) -> None:
        """Drop the piece as far as it goes and land it."""
        while not self._step_down():
            pass
        self._piece_landed()

    def _shift(self, dx: int) -> None:
        self._remove_current()
        self.current.x += dx
        if self._overlaps():
            self.current.x -= dx
        self._add_current()

    def move_left(self) -> None:
        """Move the piece one column left if there is room."""
        self._shift(-1)

    def move_right(self) -> None:
        """Move the piece one column right if there is room."""
        self._shift(1)

    def rotate(self) -> None:
        """Turn the piece to its next rotation if there is room."""
        self._remove_current()
        previous = self.current.rotation
        self.current.rotation = Rotation((previous + 1) % len(Rotation))
        if self._overlaps():
            self.current.rotation = previous
        self._add_current()

    def next_piece_cells(self) -> list[list[int]]:
        """The 4x4 preview of the upcoming piece, in the same encoding as ``cells``."""
        piece = self.upcoming
        value = piece.kind + 1
        return [
            [value if filled else 0 for filled in row]
            for row in shape(piece.kind, piece.rotation)
        ]