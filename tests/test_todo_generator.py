from pocketapps.todo_generator import generate_todo
from pocketapps.todo_model import Task, TaskState, Todo
from pocketapps.todo_parser import parse_todo


def test_empty_list_gives_empty_text():
    assert generate_todo(Todo()) == ""


def test_format_of_done_and_undone_tasks():
    todo = Todo([Task("Go shopping"), Task("Pay bills", TaskState.DONE)])
    assert generate_todo(todo) == "- [ ] Go shopping\n- [x] Pay bills\n"


def test_one_line_per_task():
    todo = Todo([Task(f"task {n}") for n in range(5)])
    lines = generate_todo(todo).splitlines()
    assert len(lines) == len(todo)
    assert all(line.startswith("- [ ] ") for line in lines)


def test_round_trip_through_parser():
    todo = Todo([
        Task("write report", TaskState.DONE),
        Task("call the plumber"),
        Task("unicode \u2713 text", TaskState.DONE),
    ])
    assert parse_todo(generate_todo(todo)) == todo


def test_generated_text_parses_to_same_text():
    text = "- [x] alpha\n- [ ] beta\n"
    assert generate_todo(parse_todo(text)) == text