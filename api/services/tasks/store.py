"""
In-memory task store.

The store owns every Task. Callers only ever receive copies, so the
records in the list can change only through the methods below.
"""
import logging
import threading
from typing import Iterable, List, Optional

from .models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered list of tasks plus the next id to hand out"""

    def __init__(self):
        self._tasks: List[Task] = []
        self._next_id: int = 1
        # Handlers run on the event loop, but a threaded server must not
        # interleave two read-modify-write sequences either.
        self._lock = threading.RLock()

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> "TaskStore":
        """Build a store seeded with tasks from the bootstrap source"""
        store = cls()
        store._tasks = [task.model_copy() for task in tasks]
        store._next_id = max((task.id for task in store._tasks), default=0) + 1
        return store

    @property
    def next_id(self) -> int:
        return self._next_id

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get_all_tasks(self) -> List[Task]:
        """Get all tasks in insertion order"""
        with self._lock:
            return [task.model_copy() for task in self._tasks]

    def _index_of(self, task_id: int) -> Optional[int]:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        return None

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        """Get a specific task by ID"""
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                return None
            return self._tasks[idx].model_copy()

    def create_task(self, title: str, description: str, completed: bool = False) -> Task:
        """Create a new task at the end of the list"""
        with self._lock:
            new_task = Task(
                id=self._next_id,
                title=title.strip(),
                description=description.strip(),
                completed=completed,
            )
            self._tasks.append(new_task)
            self._next_id += 1

        logger.info(f"Created task with ID {new_task.id}")
        return new_task.model_copy()

    def update_task(self, task_id: int, title: str, description: str, completed: bool) -> Optional[Task]:
        """Replace every mutable field of a task, keeping its id and position"""
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                return None
            updated_task = Task(
                id=task_id,
                title=title.strip(),
                description=description.strip(),
                completed=completed,
            )
            self._tasks[idx] = updated_task

        logger.info(f"Updated task {task_id}")
        return updated_task.model_copy()

    def delete_task(self, task_id: int) -> Optional[Task]:
        """
        Delete a task
        Returns the removed task, or None if not found
        """
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                return None
            deleted = self._tasks.pop(idx)

        logger.info(f"Deleted task {task_id}")
        return deleted
