import io

import pytest

from pocketapps.tictactoe import Board, GameState, main


def play(board, moves):
    for square, mark in moves:
        assert board.move(square, mark)


def test_new_board_is_empty_and_playing():
    board = Board()
    assert all(board.char_at(x, y) == " " for x in range(3) for y in range(3))
    assert board.state() is GameState.PLAYING


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_char_at_off_board(x, y):
    board = Board()
    assert board.char_at(x, y) is None
    assert board.is_move_legal(x, y) is False
    assert board.move_xy(x, y, "x") is False


def test_move_xy_occupies_square():
    board = Board()
    assert board.move_xy(2, 1, "x") is True
    assert board.char_at(2, 1) == "x"
    assert board.is_move_legal(2, 1) is False
    assert board.move_xy(2, 1, "o") is False
    assert board.char_at(2, 1) == "x"


def test_square_numbering():
    board = Board()
    board.move(2, "x")
    board.move(4, "o")
    board.move(9, "x")
    assert board.char_at(1, 0) == "x"
    assert board.char_at(0, 1) == "o"
    assert board.char_at(2, 2) == "x"


@pytest.mark.parametrize("square", [0, 10, -1, 100])
def test_move_outside_numbering_is_rejected(square):
    board = Board()
    assert board.move(square, "x") is False
    assert board.state() is GameState.PLAYING


@pytest.mark.parametrize(
    "squares",
    [(1, 2, 3), (4, 5, 6), (7, 8, 9), (1, 4, 7), (2, 5, 8), (3, 6, 9), (1, 5, 9), (3, 5, 7)],
)
def test_three_in_a_line_wins(squares):
    board = Board()
    play(board, [(s, "o") for s in squares])
    assert board.state() is GameState.WIN


def test_full_board_without_line_is_draw():
    board = Board()
    layout = "xoxxooox" + "x"
    play(board, [(i + 1, mark) for i, mark in enumerate(layout)])
    assert board.state() is GameState.DRAW


def test_draw_layout():
    board = Board()
    board.move(1, "x")
    lines = board.draw().split("\n")
    assert lines[0] == ""
    assert lines[1] == " x |   |   "
    assert lines[2] == "-----------"
    assert lines[3] == "   |   |   "
    assert lines[5] == "   |   |   "
    assert str(board) == board.draw()


def test_main_reports_winner(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n4\n2\n5\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Winner!" in out
    assert "(turn #4)" in out


def test_main_ignores_illegal_moves(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\nabc\n4\n2\n5\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Winner!" in out
    assert out.count("(turn #1)") == 3


def test_main_reports_draw(monkeypatch, capsys):
    moves = "1\n2\n3\n5\n4\n6\n8\n7\n9\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(moves))
    assert main([]) == 0
    assert "Draw!" in capsys.readouterr().out


def test_main_stops_at_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 1