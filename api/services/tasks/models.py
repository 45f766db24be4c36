"""Task domain model and typed request schemas."""

from typing import Annotated

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator

# Largest id a task can carry (signed 64-bit)
MAX_TASK_ID = 2 ** 63 - 1

TaskId = Annotated[StrictInt, Field(gt=0, le=MAX_TASK_ID)]


class Task(BaseModel):
    id: TaskId
    title: StrictStr
    description: StrictStr
    completed: StrictBool = False

    @field_validator("title", "description")
    @classmethod
    def fields_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-empty string")
        return value


class TaskCreate(BaseModel):
    """Body of POST /tasks, built only after validation passed"""
    title: StrictStr
    description: StrictStr
    completed: StrictBool = False


class TaskUpdate(BaseModel):
    """Body of PUT /tasks/{id}; no partial updates, every field is required"""
    title: StrictStr
    description: StrictStr
    completed: StrictBool
