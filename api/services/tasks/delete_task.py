"""Delete task service."""

from api.errors import MalformedIdError, NotFoundError
from api.responses import ServiceResult
from .store import TaskStore
from .validation import parse_id


async def delete_task(store: TaskStore, raw_id: str) -> ServiceResult:
    """
    Delete a task.

    Args:
        store: The task store
        raw_id: The ID exactly as it appeared in the URL

    Returns:
        Result holding the deleted task, or MalformedIdError / NotFoundError
    """
    task_id = parse_id(raw_id)
    if task_id is None:
        return ServiceResult.failure(MalformedIdError())

    deleted = store.delete_task(task_id)
    if deleted is None:
        return ServiceResult.failure(NotFoundError())

    return ServiceResult.success(deleted)
