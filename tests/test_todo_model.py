import pytest

from pocketapps.todo_model import Task, TaskState, Todo


def make_todo():
    return Todo([
        Task("a"),
        Task("b", TaskState.DONE),
        Task("c"),
        Task("d", TaskState.DONE),
    ])


def test_new_task_is_undone():
    assert Task("x").state == TaskState.UNDO


def test_push_appends_in_order():
    todo = Todo()
    todo.push(Task("first"))
    todo.push(Task("second"))
    assert len(todo) == 2
    assert [t.text for t in todo] == ["first", "second"]


def test_get_returns_task_at_index():
    todo = make_todo()
    assert todo.get(0).text == "a"
    assert todo.get(3).text == "d"


@pytest.mark.parametrize("index", [4, 10, -1])
def test_get_out_of_range(index):
    with pytest.raises(IndexError):
        make_todo().get(index)


def test_pop_removes_and_shifts():
    todo = make_todo()
    removed = todo.pop(1)
    assert removed.text == "b"
    assert [t.text for t in todo] == ["a", "c", "d"]
    assert todo.get(1).text == "c"


def test_pop_out_of_range_leaves_list_intact():
    todo = make_todo()
    with pytest.raises(IndexError):
        todo.pop(4)
    assert len(todo) == 4


def test_clear_removes_everything():
    todo = make_todo()
    todo.clear()
    assert len(todo) == 0
    assert list(todo) == []


def test_clean_drops_done_tasks():
    todo = make_todo()
    todo.clean()
    assert [t.text for t in todo] == ["a", "c"]
    assert all(t.state == TaskState.UNDO for t in todo)


def test_clean_of_all_done_empties_list():
    todo = Todo([Task("x", TaskState.DONE), Task("y", TaskState.DONE)])
    todo.clean()
    assert len(todo) == 0


def test_state_change_is_seen_through_get():
    todo = make_todo()
    todo.get(0).state = TaskState.DONE
    todo.clean()
    assert [t.text for t in todo] == ["c"]


def test_equality_compares_tasks():
    assert make_todo() == make_todo()
    other = make_todo()
    other.pop(0)
    assert not (make_todo() == other)