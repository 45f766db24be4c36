"""
Application configuration settings
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App metadata
    app_name: str = "Task Manager API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server binding (used by dev.py)
    host: str = "0.0.0.0"
    port: int = 3000

    log_level: str = "INFO"

    # Bootstrap data, read once at startup and never written back
    tasks_data_path: str = "task.json"

    # CORS settings
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:5173",  # Vite dev server
    ]

    # e.g., ALLOWED_ORIGINS_ENV=https://tasks.example.com,https://admin.example.com
    allowed_origins_env: str = ""

    @property
    def get_allowed_origins(self) -> List[str]:
        """Get combined allowed origins from defaults and environment"""
        origins = self.allowed_origins.copy()
        if self.allowed_origins_env:
            origins.extend([o.strip() for o in self.allowed_origins_env.split(",") if o.strip()])
        return origins

    # Environment
    api_env: str = "development"

    class Config:
        # Load from .env file for local development
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields in .env


settings = Settings()
