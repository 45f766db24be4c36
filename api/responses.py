"""
Service results and their translation into HTTP responses.

Task services never raise for expected failures. They return a
ServiceResult holding either a value or a TaskAPIError, and the routers
turn that into a JSONResponse with to_response().
"""
from dataclasses import dataclass
from typing import Any, Optional
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from api.errors import TaskAPIError


@dataclass(frozen=True)
class ServiceResult:
    value: Any = None
    error: Optional[TaskAPIError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "ServiceResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: TaskAPIError) -> "ServiceResult":
        return cls(error=error)


def error_response(error: TaskAPIError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_body())


def to_response(result: ServiceResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Map a service result onto a JSON response"""
    if not result.ok:
        return error_response(result.error)
    return JSONResponse(status_code=success_status, content=jsonable_encoder(result.value))
