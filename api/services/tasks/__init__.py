"""Tasks service modules."""

from .create_task import create_task
from .get_tasks import get_tasks, get_task_by_id
from .update_task import update_task
from .delete_task import delete_task
from .models import Task, TaskCreate, TaskUpdate
from .store import TaskStore

__all__ = [
    "create_task",
    "get_tasks",
    "get_task_by_id",
    "update_task",
    "delete_task",
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskStore",
]
