"""
Bootstrap task data for core-api
Reads the initial task list from a JSON document of the form {"tasks": [...]}.
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from api.services.tasks.models import Task

logger = logging.getLogger(__name__)


def read_tasks_file(path: Union[str, Path]) -> List[Task]:
    """
    Parse the bootstrap file.

    Args:
        path: Location of the JSON document

    Returns:
        The tasks in file order

    Raises:
        OSError: If the file cannot be read
        ValueError: If the document is not valid JSON, has the wrong shape,
            or repeats a task id
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)

    if not isinstance(data, dict):
        raise ValueError("Bootstrap document must be a JSON object")

    raw_tasks = data.get("tasks")
    if raw_tasks is None:
        return []
    if not isinstance(raw_tasks, list):
        raise ValueError("'tasks' must be a list")

    tasks = [Task.model_validate(item) for item in raw_tasks]

    ids = [task.id for task in tasks]
    if len(ids) != len(set(ids)):
        raise ValueError("Duplicate task ids in bootstrap data")

    return tasks


def load_initial_tasks(path: Union[str, Path]) -> List[Task]:
    """
    Load the initial tasks, falling back to an empty list on any failure.
    Startup is never aborted because of bad bootstrap data.
    """
    try:
        tasks = read_tasks_file(path)
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"❌ Error loading initial data from {path}: {e}")
        return []

    logger.info(f"📋 Loaded {len(tasks)} tasks from {path}")
    return tasks
