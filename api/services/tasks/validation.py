"""Validation rules for task payloads and task IDs."""

import re
from typing import Any, List, Optional

from .models import MAX_TASK_ID

TITLE_ERROR = "Title is required and must be a non-empty string"
DESCRIPTION_ERROR = "Description is required and must be a non-empty string"
COMPLETED_ERROR = "Completed must be a boolean value"

_ID_PATTERN = re.compile(r"[0-9]+")


def _is_non_blank_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_task(candidate: Any, require_completed: bool = False) -> List[str]:
    """
    Check a task payload and collect every problem found.

    Args:
        candidate: The decoded JSON body. Anything other than a dict is
            treated as an empty object.
        require_completed: True for updates, where `completed` must be sent.

    Returns:
        Error messages in rule order; an empty list means the payload is valid.
    """
    data = candidate if isinstance(candidate, dict) else {}
    errors = []

    if not _is_non_blank_string(data.get("title")):
        errors.append(TITLE_ERROR)

    if not _is_non_blank_string(data.get("description")):
        errors.append(DESCRIPTION_ERROR)

    if "completed" in data or require_completed:
        if not isinstance(data.get("completed"), bool):
            errors.append(COMPLETED_ERROR)

    return errors


def parse_id(raw: Any) -> Optional[int]:
    """
    Turn a URL id into an integer.

    Returns None when raw is not a decimal integer greater than zero.
    Digit strings longer than any storable id map to MAX_TASK_ID + 1,
    which no task can hold, so they are well-formed but never found.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    if not isinstance(raw, str) or not _ID_PATTERN.fullmatch(raw):
        return None

    digits = raw.lstrip("0")
    if not digits:
        return None
    if len(digits) > len(str(MAX_TASK_ID)):
        return MAX_TASK_ID + 1
    return int(digits)


def validate_id(raw: Any) -> bool:
    """True if raw is a decimal integer string greater than zero"""
    return parse_id(raw) is not None
