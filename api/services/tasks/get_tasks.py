"""Get tasks service."""

from api.errors import MalformedIdError, NotFoundError
from api.responses import ServiceResult
from .store import TaskStore
from .validation import parse_id


async def get_tasks(store: TaskStore) -> ServiceResult:
    """
    Get every task in insertion order.

    Args:
        store: The task store

    Returns:
        Result holding the list of tasks
    """
    return ServiceResult.success(store.get_all_tasks())


async def get_task_by_id(store: TaskStore, raw_id: str) -> ServiceResult:
    """
    Get a specific task by ID.

    Args:
        store: The task store
        raw_id: The ID exactly as it appeared in the URL

    Returns:
        Result holding the task, or MalformedIdError / NotFoundError
    """
    task_id = parse_id(raw_id)
    if task_id is None:
        return ServiceResult.failure(MalformedIdError())

    task = store.get_task_by_id(task_id)
    if task is None:
        return ServiceResult.failure(NotFoundError())

    return ServiceResult.success(task)
