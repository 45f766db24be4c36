"""
FastAPI dependencies shared by the routers
"""
from fastapi import Request
from api.services.tasks.store import TaskStore


async def get_task_store(request: Request) -> TaskStore:
    """
    Return the task store attached to the running application.

    The store lives on app.state rather than in a module global, so each
    application instance (and each test) gets its own.
    """
    return request.app.state.task_store
