import itertools

import pytest

from pocketapps.tetris_game import HEIGHT, WIDTH, Game
from pocketapps.tetris_pieces import PieceKind, Rotation, shape
from pocketapps.tetris_score import ScoreBoard


class FixedRng:
    def __init__(self, values):
        self._values = itertools.cycle(values)

    def randrange(self, stop):
        return next(self._values) % stop


def filled(game):
    return sum(1 for row in game.cells for cell in row if cell)


@pytest.fixture
def make_game(tmp_path):
    def factory(values=(0,), on_game_over=None):
        scores = ScoreBoard(path=tmp_path / "score")
        return Game(rng=FixedRng(values), scores=scores, on_game_over=on_game_over)

    return factory


def test_new_game_state(make_game):
    game = make_game()
    assert len(game.cells) == HEIGHT
    assert all(len(row) == WIDTH for row in game.cells)
    assert filled(game) == 4
    assert game.score == 0
    assert game.level == 1
    assert game.over is False
    assert game.current.kind is PieceKind.I


def test_move_left_stops_at_wall(make_game):
    game = make_game()
    for _ in range(WIDTH * 2):
        game.move_left()
    assert game.current.x == 0
    assert filled(game) == 4
    assert [row[0] for row in game.cells[:4]] == [1, 1, 1, 1]


def test_move_right_stops_at_wall(make_game):
    game = make_game()
    for _ in range(WIDTH * 2):
        game.move_right()
    assert game.current.x == WIDTH - 1
    assert filled(game) == 4


def test_move_down_sets_delay(make_game):
    game = make_game()
    start_y = game.current.y
    game.move_down()
    assert game.current.y == start_y + 1
    assert game.delay == 720


def test_move_bottom_without_lines_scores_one(make_game):
    game = make_game()
    game.move_bottom()
    assert game.score == 1
    assert filled(game) == 8
    assert [row[4] for row in game.cells[HEIGHT - 4:]] == [1, 1, 1, 1]


def test_completed_line_is_removed(make_game):
    game = make_game()
    for col in range(WIDTH):
        if col != 4:
            game.cells[HEIGHT - 1][col] = 7
    game.move_bottom()
    assert game.score == 40
    assert game.level == 1
    assert game.cells[HEIGHT - 1] == [0, 0, 0, 0, 1, 0, 0, 0, 0, 0]


def test_rotate_turns_piece(make_game):
    game = make_game()
    game.rotate()
    assert game.current.rotation is Rotation.LEFT
    assert game.cells[game.current.y][4:8] == [1, 1, 1, 1]
    assert filled(game) == 4


def test_four_rotations_return_to_start(make_game):
    game = make_game(values=(4,))
    before = [row[:] for row in game.cells]
    for _ in range(4):
        game.rotate()
    assert game.current.rotation is Rotation.NORMAL
    assert game.cells == before


def test_rotate_blocked_at_wall(make_game):
    game = make_game()
    for _ in range(WIDTH):
        game.move_right()
    game.rotate()
    assert game.current.rotation is Rotation.NORMAL
    assert filled(game) == 4


def test_next_piece_preview(make_game):
    game = make_game(values=(0, 1))
    preview = game.next_piece_cells()
    expected_shape = shape(game.upcoming.kind, game.upcoming.rotation)
    assert [[bool(c) for c in row] for row in preview] == [
        [bool(c) for c in row] for row in expected_shape
    ]
    assert {c for row in preview for c in row} == {0, game.upcoming.kind + 1}


def test_game_over_when_new_piece_cannot_spawn(make_game):
    calls = []
    game = make_game(values=(0, 1), on_game_over=calls.append)
    game.cells[2][5] = 9
    game.move_bottom()
    assert game.over is True
    assert calls == [game]
    assert game.cells[3][4] == 0

    game.start_new_game()
    assert game.over is False
    assert game.score == 0
    assert filled(game) == 4


def test_level_follows_score(make_game):
    game = make_game()
    game.scores.score = 699
    for col in range(WIDTH):
        if col != 4:
            game.cells[HEIGHT - 1][col] = 7
    game.move_bottom()
    assert game.score == 739
    assert game.level == 2