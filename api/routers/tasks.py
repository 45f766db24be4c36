"""
Tasks router - HTTP endpoints for task management
"""
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from typing import Any
from api.services.tasks import (
    create_task,
    get_tasks,
    get_task_by_id,
    update_task,
    delete_task,
)
from api.services.tasks.store import TaskStore
from api.dependencies import get_task_store
from api.errors import UnhandledError
from api.responses import ServiceResult, to_response
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tasks", tags=["tasks"])


def _log_result(action: str, result: ServiceResult) -> None:
    if result.ok:
        logger.info(f"✅ {action}")
    else:
        logger.info(f"⚠️ {action} rejected: {result.error.status_code} {result.error.message}")


@router.get("")
@router.get("/", include_in_schema=False)
async def get_tasks_endpoint(store: TaskStore = Depends(get_task_store)) -> JSONResponse:
    """
    Get all tasks in insertion order.
    """
    try:
        result = await get_tasks(store)
        logger.info(f"📋 Fetched {len(result.value)} tasks")
    except Exception:
        logger.exception("❌ Error fetching tasks")
        result = ServiceResult.failure(UnhandledError())
    return to_response(result)


@router.get("/{task_id}")
async def get_task_endpoint(task_id: str, store: TaskStore = Depends(get_task_store)) -> JSONResponse:
    """
    Get a specific task.
    """
    try:
        result = await get_task_by_id(store, task_id)
        _log_result(f"Fetch task {task_id}", result)
    except Exception:
        logger.exception(f"❌ Error fetching task {task_id}")
        result = ServiceResult.failure(UnhandledError())
    return to_response(result)


@router.post("")
@router.post("/", include_in_schema=False)
async def create_task_endpoint(
    payload: Any = Body(None),
    store: TaskStore = Depends(get_task_store)
) -> JSONResponse:
    """
    Create a new task.
    Body: {"title": str, "description": str, "completed": bool (optional)}
    """
    try:
        result = await create_task(store, payload)
        action = f"Create task {result.value.id}" if result.ok else "Create task"
        _log_result(action, result)
    except Exception:
        logger.exception("❌ Error creating task")
        result = ServiceResult.failure(UnhandledError())
    return to_response(result, success_status=status.HTTP_201_CREATED)


@router.put("/{task_id}")
async def update_task_endpoint(
    task_id: str,
    payload: Any = Body(None),
    store: TaskStore = Depends(get_task_store)
) -> JSONResponse:
    """
    Replace a task.
    Body: {"title": str, "description": str, "completed": bool} - all required
    """
    try:
        result = await update_task(store, task_id, payload)
        _log_result(f"Update task {task_id}", result)
    except Exception:
        logger.exception(f"❌ Error updating task {task_id}")
        result = ServiceResult.failure(UnhandledError())
    return to_response(result)


@router.delete("/{task_id}")
async def delete_task_endpoint(task_id: str, store: TaskStore = Depends(get_task_store)) -> JSONResponse:
    """
    Delete a task and return it.
    """
    try:
        result = await delete_task(store, task_id)
        _log_result(f"Delete task {task_id}", result)
    except Exception:
        logger.exception(f"❌ Error deleting task {task_id}")
        result = ServiceResult.failure(UnhandledError())
    return to_response(result)
