"""Read the plain-text todo format: one ``- [ ] task`` or ``- [x] task`` per line."""

from __future__ import annotations

import re

from pocketapps.todo_model import Task, TaskState, Todo

__all__ = ["TodoSyntaxError", "parse_todo"]

_BLANKS = " \t"
_TASK_LINE = re.compile(r"[ \t]*-[ \t]*\[[ \t]*(x?)[ \t]*\][ \t]*(.*)", re.DOTALL)


class TodoSyntaxError(ValueError):
    """A line of a todo file is not a task."""

    def __init__(self, lineno: int) -> None:
        super().__init__(f"syntax error at line {lineno}")
        self.lineno = lineno


def parse_todo(text: str) -> Todo:
    """Parse ``text`` into a :class:`Todo`; blank lines are ignored.

    Raises :class:`TodoSyntaxError` naming the first line that is not a task.
    """
    todo = Todo()
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line.strip(_BLANKS):
            continue
        match = _TASK_LINE.fullmatch(line)
        if match is None:
            raise TodoSyntaxError(lineno)
        state = TaskState.DONE if match.group(1) else TaskState.UNDO
        todo.push(Task(match.group(2), state))
    return todo