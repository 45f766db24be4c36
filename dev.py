#!/usr/bin/env python3
"""
Development server runner for local testing
Run with: python dev.py
"""
import uvicorn

from api.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "index:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )
