"""Tasks and the ordered list that holds them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["TaskState", "Task", "Todo"]


class TaskState(IntEnum):
    UNDO = 0
    DONE = 1


@dataclass
class Task:
    """One entry of a todo list."""

    text: str
    state: TaskState = TaskState.UNDO


class Todo:
    """An ordered list of tasks, indexed from zero."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Todo):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"Todo({self._tasks!r})"

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"task {index} not found")

    def push(self, task: Task) -> None:
        """Append ``task`` at the end."""
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        """The task at ``index``; IndexError if there is none."""
        self._check(index)
        return self._tasks[index]

    def pop(self, index: int) -> Task:
        """Remove and return the task at ``index``; IndexError if there is none."""
        self._check(index)
        return self._tasks.pop(index)

    def clear(self) -> None:
        """Remove every task."""
        self._tasks.clear()

    def clean(self) -> None:
        """Remove the tasks that are done, keeping the others in order."""
        self._tasks[:] = [t for t in self._tasks if t.state != TaskState.DONE]