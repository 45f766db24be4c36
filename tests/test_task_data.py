import json

import pytest

from lib.task_data import load_initial_tasks, read_tasks_file


def write(tmp_path, payload):
    path = tmp_path / "task.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_loads_tasks_in_order(tmp_path):
    path = write(tmp_path, {"tasks": [
        {"id": 2, "title": "b", "description": "second", "completed": True},
        {"id": 1, "title": "a", "description": "first"},
    ]})

    tasks = load_initial_tasks(path)

    assert [t.id for t in tasks] == [2, 1]
    assert tasks[0].completed is True
    assert tasks[1].completed is False


def test_missing_tasks_key_is_empty(tmp_path, caplog):
    assert load_initial_tasks(write(tmp_path, {})) == []
    assert load_initial_tasks(write(tmp_path, {"tasks": None})) == []
    assert "Error loading initial data" not in caplog.text


def test_missing_file_falls_back_to_empty(tmp_path, caplog):
    assert load_initial_tasks(tmp_path / "absent.json") == []
    assert "Error loading initial data" in caplog.text


@pytest.mark.parametrize("payload", [
    "{not json",
    "[1, 2, 3]",
    '{"tasks": {"id": 1}}',
    '{"tasks": [{"id": "x", "title": "a", "description": "b"}]}',
    '{"tasks": [{"id": 1, "title": "a"}]}',
    '{"tasks": [{"id": 1, "title": "   ", "description": "b"}]}',
    '{"tasks": [{"id": 1, "title": "a", "description": ""}]}',
    '{"tasks": [{"id": 1, "title": "a", "description": "b", "completed": "yes"}]}',
    '{"tasks": [{"id": "5", "title": "a", "description": "b"}]}',
    '{"tasks": [{"id": 0, "title": "a", "description": "b"}]}',
    '{"tasks": [{"id": "5", "title": "   ", "description": "", "completed": "yes"}]}',
    '{"tasks": {}}',
    '{"tasks": 0}',
    '{"tasks": ""}',
    '{"tasks": false}',
    '{"tasks": [{"id": 1, "title": "a", "description": "b"}, {"id": 1, "title": "c", "description": "d"}]}',
])
def test_bad_documents_fall_back_to_empty(tmp_path, payload):
    assert load_initial_tasks(write(tmp_path, payload)) == []


def test_read_tasks_file_raises_on_duplicates(tmp_path):
    path = write(tmp_path, {"tasks": [
        {"id": 1, "title": "a", "description": "b"},
        {"id": 1, "title": "c", "description": "d"},
    ]})
    with pytest.raises(ValueError):
        read_tasks_file(path)


def test_non_list_tasks_is_an_error(tmp_path, caplog):
    path = write(tmp_path, {"tasks": {}})
    with pytest.raises(ValueError, match="must be a list"):
        read_tasks_file(path)

    assert load_initial_tasks(path) == []
    assert "Error loading initial data" in caplog.text
