"""Command line front end for a plain-text todo list kept in ``todo.txt``."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from enum import IntEnum
from pathlib import Path

from pocketapps.todo_generator import generate_todo
from pocketapps.todo_model import Task, TaskState, Todo
from pocketapps.todo_parser import TodoSyntaxError, parse_todo

__all__ = [
    "is_int_like",
    "str_to_int",
    "find_todo_file",
    "read_todo",
    "write_todo",
    "format_task",
    "main",
]

VERSION = "0.2.6"
FILE_NAME = "todo.txt"

_RED = 31
_GREEN = 32
_WHITE = 37

_INT_LIKE = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

HELP = """\
Usage:
  todo [-h|-v|-a]
  todo (<id> [done|undo|remove])|<task>..

Examples:
  add a task       -  todo Go shopping
  check a task     -  todo 1 done
  undo a task      -  todo 1 undo
  remove a task    -  todo 1 rm/remove
  list undo tasks  -  todo
  list all tasks   -  todo --all
  clear done tasks -  todo clean/cleanup
  clear all tasks  -  todo clear"""


class _Exit(IntEnum):
    OK = 0
    EIOR = 1
    EIOW = 2
    ENOMEM = 3
    ESYNTAX = 4
    ENOTFOUND = 5
    EINVALIDIDX = 6


def is_int_like(text: str) -> bool:
    """True when ``text`` is a whole base-10 integer, not starting with a blank."""
    if not text or text[0] in " \t":
        return False
    return _INT_LIKE.fullmatch(text) is not None


def str_to_int(text: str) -> int:
    """The integer at the start of ``text``, or 0 if it does not start with one."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def find_todo_file() -> Path:
    """``./todo.txt`` if it exists, else ``~/todo.txt``, created when missing.

    Raises OSError when the file in the home directory cannot be created.
    """
    local = Path(FILE_NAME)
    if local.exists():
        return local
    home = Path("~").expanduser() / FILE_NAME
    if not home.exists():
        home.touch()
    return home


def read_todo(path: str | Path) -> Todo:
    """Read and parse the todo file at ``path``.

    Raises OSError when it cannot be read and TodoSyntaxError when it is malformed.
    """
    return parse_todo(Path(path).read_text(encoding="utf-8"))


def write_todo(path: str | Path, todo: Todo) -> None:
    """Write ``todo`` to ``path`` in its plain-text form."""
    Path(path).write_text(generate_todo(todo), encoding="utf-8")


def format_task(task: Task, index: int) -> str:
    """One coloured listing line for ``task``, numbered ``index``."""
    if task.state == TaskState.DONE:
        color, mark = _GREEN, "✓"
    else:
        color, mark = _RED, "✖"
    return f"{index}. \033[{color}m{mark}\033[0m {task.text}"


def _format_removed(text: str) -> str:
    return f"\033[{_WHITE}m-\033[0m {text}"


def _list(todo: Todo, *, only_undo: bool) -> None:
    for index, task in enumerate(todo, start=1):
        if not only_undo or task.state == TaskState.UNDO:
            print(format_task(task, index))


def _by_index(args: list[str], path: Path, todo: Todo) -> int:
    index = str_to_int(args[0])
    if index < 1:
        print(f"invalid task index {index}")
        return _Exit.EINVALIDIDX
    try:
        task = todo.get(index - 1)
    except IndexError:
        print(f"task {index} not found")
        return _Exit.ENOTFOUND

    if len(args) == 1:
        print(format_task(task, index))
        return _Exit.OK

    action = args[1]
    if action in ("done", "undo"):
        task.state = TaskState.DONE if action == "done" else TaskState.UNDO
        write_todo(path, todo)
        print(format_task(task, index))
    elif action in ("remove", "rm"):
        removed = todo.pop(index - 1)
        write_todo(path, todo)
        print(_format_removed(removed.text))
    else:
        print(HELP)
    return _Exit.OK


def _add(args: list[str], path: Path, todo: Todo) -> int:
    task = Task(" ".join(args), TaskState.UNDO)
    todo.push(task)
    write_todo(path, todo)
    print(format_task(task, len(todo)))
    return _Exit.OK


def _dispatch(args: list[str], path: Path, todo: Todo) -> int:
    if not args:
        _list(todo, only_undo=True)
        return _Exit.OK

    if len(args) == 1:
        command = args[0]
        if command in ("-h", "--help"):
            print(HELP)
            return _Exit.OK
        if command in ("-v", "--version"):
            print(f"todo{VERSION}")
            return _Exit.OK
        if command in ("-a", "--all"):
            _list(todo, only_undo=False)
            return _Exit.OK
        if command == "clear":
            todo.clear()
            write_todo(path, todo)
            return _Exit.OK
        if command in ("cleanup", "clean"):
            todo.clean()
            write_todo(path, todo)
            return _Exit.OK

    if len(args) <= 2 and is_int_like(args[0]):
        return _by_index(args, path, todo)
    return _add(args, path, todo)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the todo command; return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        path = find_todo_file()
    except OSError as exc:
        print(f"error to write {exc.filename}")
        return _Exit.EIOW

    try:
        todo = read_todo(path)
    except TodoSyntaxError as exc:
        print(f"syntax error at line {exc.lineno}")
        return _Exit.ENOMEM
    except OSError:
        print(f"error to read {path}")
        return _Exit.ENOMEM

    try:
        return int(_dispatch(args, path, todo))
    except OSError:
        print(f"error to write {path}")
        return _Exit.EIOW


if __name__ == "__main__":
    sys.exit(main())