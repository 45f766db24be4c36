"""
FastAPI application factory for the Task Manager API
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import Settings, settings as default_settings
from api.dependencies import get_task_store
from api.errors import RouteNotFoundError, UnhandledError, ValidationError
from api.logging_config import setup_logging
from api.responses import error_response
from api.routers import tasks
from api.services.tasks.store import TaskStore
from lib.task_data import load_initial_tasks

logger = logging.getLogger(__name__)

ENDPOINTS = [
    ("GET", "/tasks", "Get all tasks"),
    ("GET", "/tasks/:id", "Get specific task"),
    ("POST", "/tasks", "Create new task"),
    ("PUT", "/tasks/:id", "Update task"),
    ("DELETE", "/tasks/:id", "Delete task"),
]


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods on known paths both count
        # as a missing route.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return error_response(RouteNotFoundError())
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = []
        for err in exc.errors():
            if err.get("type") == "json_invalid":
                details.append("Request body must be valid JSON")
            else:
                details.append(str(err.get("msg")))
        return error_response(ValidationError(details))


def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use; defaults to the environment-loaded ones
        store: Pre-built task store; if omitted, one is seeded from
            settings.tasks_data_path

    Returns:
        A configured FastAPI instance
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    if store is None:
        store = TaskStore.from_tasks(load_initial_tasks(settings.tasks_data_path))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Server is listening on port {settings.port}")
        logger.info(f"Health check: http://localhost:{settings.port}/health")
        logger.info("API endpoints:")
        for method, path, summary in ENDPOINTS:
            logger.info(f"  {method:<6} {path:<10} - {summary}")
        yield

    app = FastAPI(
        title=settings.app_name,
        description="In-memory task manager with a small CRUD API",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.task_store = store

    # Registered before CORS so that CORS wraps it and 500s keep their headers
    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
            return error_response(UnhandledError())

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    app.include_router(tasks.router)

    @app.get("/health")
    async def health_check(task_store: TaskStore = Depends(get_task_store)):
        """Health check endpoint"""
        return {
            "status": "OK",
            "message": "Task Manager API is running",
            "totalTasks": task_store.count(),
        }

    return app
