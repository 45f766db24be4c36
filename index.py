"""
ASGI entry point for the Task Manager API
uvicorn (and Vercel) pick up `app`; serverless runtimes call `handler`.
"""
from mangum import Mangum

from api.app import create_app

app = create_app()

handler = Mangum(app, lifespan="off")
