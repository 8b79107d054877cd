"""Terminal front end for the tetris game, drawn with curses."""

from __future__ import annotations

import argparse
import curses
import sys
from collections.abc import Sequence

from pocketapps.tetris_game import HEIGHT, WIDTH, Game
from pocketapps.tetris_score import ScoreBoard

__all__ = ["TITLE", "CONTROLS", "title_cells", "main"]

TITLE = (
    "111111  222222  333333  4444444  55  666666\n"
    "  11    22        33    44   44  55  66    \n"
    "  11    22222     33    444444   55  666666\n"
    "  11    22        33    44   44  55      66\n"
    "  11    222222    33    44    44 55  666666\n"
)

CONTROLS = (
    "LEFT/RIGHT (h/l): move left/right\n"
    "UP (k): rotate piece             \n"
    "DOWN (j): move down              \n"
    "SPACE: fast down                 \n"
    "P: pause game                    \n"
    "Q: quit                          \n"
)

TICK_MS = 100
TITLE_WIDTH = 44
TITLE_HEIGHT = 5


def title_cells() -> list[list[int]]:
    """The title banner as rows of colour pair numbers, 0 where it is blank."""
    return [
        [0 if ch == " " else int(ch) for ch in line]
        for line in TITLE.splitlines()
    ]


class _Quit(Exception):
    """Raised when the player declines another game."""


def _put(win: curses.window, y: int, x: int, ch: int, attr: int = 0) -> None:
    try:
        win.addch(y, x, ch, attr)
    except curses.error:
        pass


def _text(win: curses.window, y: int, x: int, text: str) -> None:
    try:
        win.addstr(y, x, text)
    except curses.error:
        pass


def _init_colors() -> None:
    if not curses.has_colors():
        return
    background = -1
    try:
        curses.use_default_colors()
    except curses.error:
        background = curses.COLOR_BLACK
    orange = 203 if curses.COLORS > 203 else curses.COLOR_RED
    colors = (
        curses.COLOR_CYAN,
        curses.COLOR_YELLOW,
        orange,
        curses.COLOR_BLUE,
        curses.COLOR_MAGENTA,
        curses.COLOR_GREEN,
        curses.COLOR_RED,
    )
    for pair, color in enumerate(colors, start=1):
        curses.init_pair(pair, color, background)


class _Screen:
    def __init__(self, stdscr: curses.window, game: Game) -> None:
        self.stdscr = stdscr
        self.game = game
        self.title_win: curses.window | None = None
        self.game_win: curses.window | None = None
        self.score_win: curses.window | None = None

    def _block(self, value: int) -> int:
        return curses.A_REVERSE | curses.color_pair(value) if value else 0

    def draw_windows(self) -> None:
        _, cols = self.stdscr.getmaxyx()
        center = cols // 2

        title_x = max(0, center - TITLE_WIDTH // 2 - 5)
        title_y = 1

        game_x = max(0, center - WIDTH * 2 - 1)
        game_y = TITLE_HEIGHT + 2
        game_w = WIDTH * 2 + 2
        game_h = HEIGHT + 2

        score_x = game_x + game_w + 3
        score_w = max(1, cols - score_x)
        score_h = game_h - 1

        self.score_win = curses.newwin(score_h, score_w, game_y, score_x)
        self.title_win = curses.newwin(TITLE_HEIGHT, TITLE_WIDTH, title_y, title_x)
        self._print_title()
        self.game_win = curses.newwin(game_h, game_w, game_y, game_x)
        self.game_win.box()

    def destroy_windows(self) -> None:
        self.title_win = self.game_win = self.score_win = None
        self.stdscr.clear()
        self.stdscr.refresh()

    def _print_title(self) -> None:
        win = self.title_win
        for y, row in enumerate(title_cells()):
            for x, value in enumerate(row):
                _put(win, y, x, ord(" "), self._block(value))
        win.refresh()

    def _print_matrix(self) -> None:
        win = self.game_win
        for y, row in enumerate(self.game.cells):
            for x, value in enumerate(row):
                attr = self._block(value)
                _put(win, y + 1, x * 2 + 1, ord(" "), attr)
                _put(win, y + 1, x * 2 + 2, ord(" "), attr)
        win.refresh()

    def _print_score(self) -> None:
        win = self.score_win
        scores = self.game.scores
        win.erase()
        _text(win, 1, 0, f"Level: {scores.level}")
        _text(win, 2, 0, f"Score: {scores.score}")
        _text(win, 3, 0, f"High score: {scores.high_score}")

        _put(win, 5, 0, curses.ACS_ULCORNER)
        _put(win, 5, 13, curses.ACS_URCORNER)
        _put(win, 10, 0, curses.ACS_LLCORNER)
        _put(win, 10, 13, curses.ACS_LRCORNER)
        for x in range(1, 13):
            _put(win, 10, x, curses.ACS_HLINE)
        for y in range(6, 10):
            _put(win, y, 0, curses.ACS_VLINE)
            _put(win, y, 13, curses.ACS_VLINE)
        _text(win, 5, 2, "next piece")

        for y, row in enumerate(self.game.next_piece_cells()):
            for x, value in enumerate(row):
                attr = self._block(value)
                _put(win, 9 - y, 3 + x * 2, ord(" "), attr)
                _put(win, 9 - y, 4 + x * 2, ord(" "), attr)

        for offset, line in enumerate(CONTROLS.splitlines()):
            _text(win, 12 + offset, 0, line)
        win.refresh()

    def refresh(self) -> None:
        self._print_score()
        self._print_matrix()

    def prompt_new_game(self, game: Game) -> None:
        self.refresh()
        win = self.score_win
        scores = game.scores
        win.clear()
        lines = [f"Sorry, you lost :( score {scores.score}"]
        if scores.score > scores.high_score:
            lines.append("Congratulations! New record!")
            scores.high_score = scores.score
        lines.append("Start a new game ? (y/n)")
        for y, line in enumerate(lines):
            _text(win, y, 0, line)
        win.refresh()

        while True:
            key = self.stdscr.getch()
            if key == ord("y"):
                break
            if key == ord("n"):
                raise _Quit
        game.start_new_game()

    def run(self) -> None:
        game = self.game
        keys = self.stdscr
        while True:
            game.delay -= TICK_MS
            if game.delay <= 0:
                game.move_down()
            key = keys.getch()
            if key in (ord("h"), curses.KEY_LEFT):
                game.move_left()
            elif key in (ord("l"), curses.KEY_RIGHT):
                game.move_right()
            elif key in (ord("k"), curses.KEY_UP):
                game.rotate()
            elif key in (ord("j"), curses.KEY_DOWN):
                game.move_down()
            elif key == ord(" "):
                game.move_bottom()
            elif key == ord("p"):
                while keys.getch() != ord("p"):
                    pass
            elif key == ord("q"):
                return
            elif key == curses.KEY_RESIZE:
                self.destroy_windows()
                self.draw_windows()
            self.refresh()


def _play(stdscr: curses.window, scores: ScoreBoard) -> None:
    game = Game(scores=scores)

    curses.cbreak()
    stdscr.keypad(True)
    curses.noecho()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.timeout(TICK_MS)
    _init_colors()

    screen = _Screen(stdscr, game)
    game.on_game_over = screen.prompt_new_game
    stdscr.refresh()
    screen.draw_windows()
    screen.refresh()
    try:
        screen.run()
    except _Quit:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Play tetris in the terminal, keeping the high score between runs."""
    argparse.ArgumentParser(
        prog="tetris", description="A small terminal tetris game."
    ).parse_args(argv)

    scores = ScoreBoard()
    scores.load()
    try:
        curses.wrapper(_play, scores)
    except curses.error as exc:
        print(f"tetris: terminal error: {exc}", file=sys.stderr)
        return 1
    finally:
        scores.save()
    return 0


if __name__ == "__main__":
    sys.exit(main())