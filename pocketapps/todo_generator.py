"""Write a todo list back to its plain-text form."""

from __future__ import annotations

from pocketapps.todo_model import TaskState, Todo

__all__ = ["generate_todo"]


def generate_todo(todo: Todo) -> str:
    """One ``- [x] text`` or ``- [ ] text`` line per task, each ending in a newline."""
    return "".join(
        f"- [{'x' if task.state == TaskState.DONE else ' '}] {task.text}\n"
        for task in todo
    )