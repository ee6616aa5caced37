"""
Configuration
"""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, overridable through environment or .env"""

    # App
    APP_NAME: str = "Indonesia Holiday Calendar API"
    DEBUG: bool = False

    # Upstream source
    SOURCE_BASE_URL: str = "https://www.tanggalan.com"
    FETCH_TIMEOUT: float = 10.0
    USER_AGENT: str = "Mozilla/5.0 (compatible; libur-api/1.0; +https://www.tanggalan.com)"

    # Query
    MIN_YEAR: int = 1900

    # Cache: "sqlite" (persistent key/value table) or "memory"
    CACHE_BACKEND: str = "sqlite"
    CACHE_NAMESPACE: str = "libur"
    CACHE_TTL_SECONDS: int = 60 * 60 * 24  # 24 jam
    DATABASE_URL: str = "sqlite:///./data/cache.db"

    # CORS
    CORS_ORIGINS: list = ["*"]

    # Logging
    LOG_LEVEL: str = "DEBUG"
    LOG_DIR: Path = Path("logs")
    LOG_TO_FILE: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
