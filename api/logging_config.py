"""
Logging setup for the Task Manager API
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a console handler.

    Does nothing if the root logger already has handlers, so calling
    create_app() repeatedly (tests, reloads) does not duplicate output.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)
