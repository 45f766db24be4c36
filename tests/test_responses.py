import json

from api.errors import MalformedIdError, NotFoundError, UnhandledError, ValidationError
from api.responses import ServiceResult, to_response
from api.services.tasks.models import Task


def body(response):
    return json.loads(response.body)


def test_success_uses_given_status():
    task = Task(id=1, title="t", description="d")
    response = to_response(ServiceResult.success(task), success_status=201)

    assert response.status_code == 201
    assert body(response) == {"id": 1, "title": "t", "description": "d", "completed": False}


def test_success_serializes_lists():
    tasks = [Task(id=1, title="a", description="b"), Task(id=2, title="c", description="d")]
    response = to_response(ServiceResult.success(tasks))

    assert response.status_code == 200
    assert [t["id"] for t in body(response)] == [1, 2]


def test_error_mapping():
    cases = [
        (MalformedIdError(), 400, {"error": "Invalid task ID"}),
        (NotFoundError(), 404, {"error": "Task not found"}),
        (UnhandledError(), 500, {"error": "Internal server error"}),
        (ValidationError(["bad"]), 400, {"error": "Validation failed", "details": ["bad"]}),
    ]
    for error, status_code, expected in cases:
        response = to_response(ServiceResult.failure(error))
        assert response.status_code == status_code
        assert body(response) == expected


def test_result_flags():
    assert ServiceResult.success([]).ok is True
    assert ServiceResult.failure(NotFoundError()).ok is False
