# pocketapps

Four small terminal programs in one package, with no dependencies beyond
the Python standard library. The tetris game uses `curses`, so it needs a
POSIX terminal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## todo

A plain-text todo list. Tasks are kept in `./todo.txt` if that file exists
in the current directory, otherwise in `~/todo.txt` (created when missing).
The file holds one task per line in the form `- [ ] task` or `- [x] task`;
blank lines are ignored.

```
todo Go shopping       # add a task
todo                   # list tasks not yet done
todo --all             # list every task (also: -a)
todo 1                 # show task 1
todo 1 done            # mark task 1 as done
todo 1 undo            # mark task 1 as not done
todo 1 remove          # remove task 1 (also: rm)
todo clean             # remove all done tasks (also: cleanup)
todo clear             # remove all tasks
todo --help            # also: -h
todo --version         # also: -v
```

Tasks are numbered from 1. An index below 1, a task that does not exist,
an unreadable or malformed file, or a failed write prints a message and
ends with a non-zero exit status.

The list can also be used from code: `pocketapps.todo_model.Todo` holds
`Task` objects (with a `TaskState` of `UNDO` or `DONE`) and offers
`push`, `get`, `pop`, `clear` and `clean`; `get` and `pop` raise
`IndexError` for a missing task. `pocketapps.todo_parser.parse_todo`
reads the file format, raising `TodoSyntaxError` with the offending line
number in its `lineno` attribute, and
`pocketapps.todo_generator.generate_todo` writes it back out.
`pocketapps.todo_cli` has `read_todo`, `write_todo`, `find_todo_file`
and `format_task` for the same jobs the command does.

## tictactoe

Two players, `x` and `o`, take turns on one terminal, choosing squares
numbered

```
 1 | 2 | 3
 4 | 5 | 6
 7 | 8 | 9
```

```
tictactoe
```

An occupied or out-of-range square is refused and the same player is
asked again. The game ends with "Winner!" or "Draw!".

The board logic lives in `pocketapps.tictactoe.Board`: `move(square, c)`
places a mark by square number, `move_xy(x, y, c)` by zero-based column
and row, and `state()` returns a `GameState` (`WIN`, `DRAW` or
`PLAYING`). `draw()` renders the board as text.

## tetris

A curses tetris game.

```
tetris
```

Controls: left/right arrows or `h`/`l` move, up or `k` rotates, down or
`j` drops one row, space drops to the bottom, `p` pauses and `q` quits.
When a piece cannot enter the board the game offers a new one (`y`/`n`).
The high score is kept in `~/.tetris_score`.

The game rules are available without a terminal through
`pocketapps.tetris_game.Game` (a 22-row by 10-column board in `cells`,
with `move_left`, `move_right`, `move_down`, `move_bottom`, `rotate` and
`next_piece_cells`), with the pieces in `pocketapps.tetris_pieces`
(`PieceKind`, `Rotation`, `Piece`, `shape`, `random_piece`) and the
score, level and high score in `pocketapps.tetris_score.ScoreBoard`.

## sortbench

Times five simple sorting algorithms (selection, bubble, cocktail,
insertion and quick sort) on the same random integers from 0 to 999 and
checks each result.

```
sortbench                  # 20,000 values, ascending
sortbench -n 5000          # a different number of values (also: --size)
sortbench --descending     # sort into non-increasing order
sortbench --seed 42        # repeatable data
```

For each algorithm it prints the time taken in milliseconds followed by
`Successfully.` or `Unsuccessfully.`.

The algorithms are in `pocketapps.sorting`; each sorts a mutable sequence
in place using a comparison such as `ascending` or `descending`:

```python
from pocketapps.sorting import quick_sort, descending

data = [3, 1, 2]
quick_sort(data, descending)
# data == [3, 2, 1]
```

`pocketapps.sortbench.sorted_assert(raw, result, cmp)` returns True when
every item of `result` matches a distinct item of `raw` and each adjacent
pair of `result` satisfies `cmp`. `sort_test` sorts a copy of the data,
prints the timing and verdict, and returns a `SortReport`.