"""Update task service."""

from typing import Any

from api.errors import MalformedIdError, NotFoundError, ValidationError
from api.responses import ServiceResult
from .models import TaskUpdate
from .store import TaskStore
from .validation import parse_id, validate_task


async def update_task(store: TaskStore, raw_id: str, payload: Any) -> ServiceResult:
    """
    Replace a task's title, description and completion flag.

    Checks run in order: ID format, existence, then the payload. An update
    never creates a task; `completed` is required.

    Args:
        store: The task store
        raw_id: The ID exactly as it appeared in the URL
        payload: The decoded request body

    Returns:
        Result holding the updated task, or MalformedIdError,
        NotFoundError or ValidationError
    """
    task_id = parse_id(raw_id)
    if task_id is None:
        return ServiceResult.failure(MalformedIdError())

    if store.get_task_by_id(task_id) is None:
        return ServiceResult.failure(NotFoundError())

    errors = validate_task(payload, require_completed=True)
    if errors:
        return ServiceResult.failure(ValidationError(errors))

    request = TaskUpdate.model_validate(payload)

    task = store.update_task(
        task_id,
        title=request.title,
        description=request.description,
        completed=request.completed,
    )
    # Removed between the lookup and the write
    if task is None:
        return ServiceResult.failure(NotFoundError())

    return ServiceResult.success(task)
