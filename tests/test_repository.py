from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from todo_service.todos.repository import TodoRepository

def test_add_returns_fresh_todo():
    repo = TodoRepository()
    todo = repo.add("buy milk")
    assert todo.id == 1
    assert todo.text == "buy milk"
    assert todo.done is False

def test_list_is_empty_initially():
    assert TodoRepository().list() == []

def test_list_sorted_by_id():
    repo = TodoRepository()
    for t in ["c", "a", "b"]:
        repo.add(t)
    repo.toggle(2)
    repo.update(1, "z")
    ids = [t.id for t in repo.list()]
    assert ids == sorted(ids) == [1, 2, 3]

def test_update_changes_text_keeps_done():
    repo = TodoRepository()
    repo.add("a")
    repo.toggle(1)
    assert repo.update(1, "b") is True
    [todo] = repo.list()
    assert todo.text == "b" and todo.done is True

def test_update_missing_id_is_noop():
    repo = TodoRepository()
    repo.add("a")
    before = repo.list()
    assert repo.update(42, "nope") is False
    assert repo.list() == before

def test_toggle_missing_id():
    repo = TodoRepository()
    assert repo.toggle(1) is False
    assert len(repo) == 0

def test_toggle_twice_restores_done():
    repo = TodoRepository()
    repo.add("a")
    assert repo.toggle(1) is True
    assert repo.list()[0].done is True
    assert repo.toggle(1) is True
    assert repo.list()[0].done is False

def test_listed_todos_are_immutable():
    repo = TodoRepository()
    repo.add("a")
    todo = repo.list()[0]
    with pytest.raises(ValidationError):
        todo.text = "changed"
    assert repo.list()[0].text == "a"

def test_concurrent_adds_get_distinct_ids():
    repo = TodoRepository()
    n = 500
    with ThreadPoolExecutor(max_workers=16) as pool:
        todos = list(pool.map(lambda i: repo.add(f"item {i}"), range(n)))
    ids = sorted(t.id for t in todos)
    assert ids == list(range(1, n + 1))
    assert [t.id for t in repo.list()] == ids

def test_concurrent_toggles_are_not_lost():
    repo = TodoRepository()
    repo.add("a")
    # even number of flips lands back on the initial state
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: repo.toggle(1), range(200)))
    assert all(results)
    assert repo.list()[0].done is False
