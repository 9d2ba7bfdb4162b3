"""Application configuration and environment variables"""
from pydantic_settings import BaseSettings
from typing import List, Optional
import json
import os


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Server-side document store
    DATABASE_FILE: str = "data/database.json"

    # Client core: remote API and local fallback storage
    API_BASE_URL: str = "http://localhost:3000"
    LOCAL_STORAGE_FILE: str = "data/local_storage.json"
    REMOTE_TIMEOUT_SECONDS: Optional[float] = 30.0  # None disables the transport timeout

    # Periodic jobs
    REMINDER_CHECK_INTERVAL_SECONDS: int = 60
    REMINDER_WINDOW_SECONDS: int = 60
    REMINDER_SHOWN_TTL_SECONDS: int = 300
    SIDEBAR_REFRESH_INTERVAL_SECONDS: int = 60

    # CORS Configuration - can be set as JSON array string in env var
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Parse CORS_ORIGINS from environment variable if set (for production deployments)
        cors_env = os.getenv("CORS_ORIGINS")
        if cors_env:
            cors_env = cors_env.strip()
            if cors_env.startswith("["):
                try:
                    parsed = json.loads(cors_env)
                    if isinstance(parsed, list):
                        self.CORS_ORIGINS = parsed
                except (json.JSONDecodeError, ValueError):
                    pass  # Fall back to pydantic's parsed value
            elif "," in cors_env:
                self.CORS_ORIGINS = [origin.strip() for origin in cors_env.split(",") if origin.strip()]

    # Application Configuration
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
