import threading

import pytest

from api.services.tasks.models import Task
from api.services.tasks.store import TaskStore


@pytest.fixture
def store():
    return TaskStore()


def test_empty_store(store):
    assert store.get_all_tasks() == []
    assert store.count() == 0
    assert store.next_id == 1


def test_create_assigns_sequential_ids(store):
    first = store.create_task("a", "b")
    second = store.create_task("c", "d", completed=True)

    assert (first.id, second.id) == (1, 2)
    assert second.completed is True
    assert store.next_id == 3


def test_create_trims_strings(store):
    task = store.create_task("  title ", " description  ")
    assert task.title == "title"
    assert task.description == "description"


def test_get_missing_returns_none(store):
    assert store.get_task_by_id(1) is None


def test_returned_tasks_are_copies(store):
    created = store.create_task("a", "b")
    created.title = "mutated outside"

    listed = store.get_all_tasks()
    listed[0].completed = True

    stored = store.get_task_by_id(created.id)
    assert stored.title == "a"
    assert stored.completed is False


def test_update_replaces_fields(store):
    task = store.create_task("a", "b")

    updated = store.update_task(task.id, " x ", "y", True)

    assert updated == Task(id=task.id, title="x", description="y", completed=True)
    assert store.get_task_by_id(task.id) == updated


def test_update_missing_returns_none(store):
    assert store.update_task(5, "x", "y", False) is None
    assert store.count() == 0


def test_delete_returns_removed_task(store):
    keep = store.create_task("keep", "me")
    gone = store.create_task("drop", "me")

    deleted = store.delete_task(gone.id)

    assert deleted == gone
    assert store.get_all_tasks() == [keep]
    assert store.delete_task(gone.id) is None


def test_deleted_ids_are_not_reused(store):
    store.create_task("a", "b")
    last = store.create_task("c", "d")
    store.delete_task(last.id)

    assert store.create_task("e", "f").id == last.id + 1


def test_from_tasks_continues_after_highest_id():
    store = TaskStore.from_tasks([
        Task(id=3, title="a", description="b"),
        Task(id=1, title="c", description="d"),
    ])

    assert [t.id for t in store.get_all_tasks()] == [3, 1]
    assert store.create_task("e", "f").id == 4


def test_from_tasks_empty():
    assert TaskStore.from_tasks([]).next_id == 1


def test_concurrent_creates_get_unique_ids(store):
    def worker():
        for _ in range(50):
            store.create_task("t", "d")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [task.id for task in store.get_all_tasks()]
    assert len(ids) == 200
    assert ids == sorted(set(ids))


@pytest.mark.parametrize("fields", [
    {"id": 1, "title": "  ", "description": "d"},
    {"id": 1, "title": "t", "description": ""},
    {"id": 1, "title": "t", "description": "d", "completed": "yes"},
    {"id": "1", "title": "t", "description": "d"},
    {"id": 0, "title": "t", "description": "d"},
])
def test_task_model_rejects_invalid_records(fields):
    with pytest.raises(ValueError):
        Task.model_validate(fields)
