"""Create task service."""

from typing import Any

from api.errors import ValidationError
from api.responses import ServiceResult
from .models import TaskCreate
from .store import TaskStore
from .validation import validate_task


async def create_task(store: TaskStore, payload: Any) -> ServiceResult:
    """
    Create a new task.

    Args:
        store: The task store
        payload: The decoded request body

    Returns:
        Result holding the created task, or a ValidationError listing
        every problem with the payload
    """
    errors = validate_task(payload)
    if errors:
        return ServiceResult.failure(ValidationError(errors))

    request = TaskCreate.model_validate(payload)

    task = store.create_task(
        title=request.title,
        description=request.description,
        completed=request.completed,
    )
    return ServiceResult.success(task)
