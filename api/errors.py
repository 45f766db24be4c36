"""
Error types surfaced by the task endpoints.
Each error knows its HTTP status and how to render its JSON body.
"""
from typing import Any, Dict, List, Optional
from fastapi import status


class TaskAPIError(Exception):
    """Base class for errors that map onto an HTTP error response"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(TaskAPIError):
    """Request payload is missing a required field or has the wrong type"""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, details: List[str]):
        super().__init__()
        self.details = list(details)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.details}


class MalformedIdError(TaskAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid task ID"


class NotFoundError(TaskAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Task not found"


class RouteNotFoundError(TaskAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Route not found"


class UnhandledError(TaskAPIError):
    """Anything else. The message is fixed so internals never reach the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"
