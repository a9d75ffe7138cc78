import os
import logging
from pydantic import BaseModel, Field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

class Config(BaseModel):
    app_name: str = "HR Records"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"
    version: str = "1.0.0"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./database.db")

    # "sql" uses database_url, "memory" keeps everything in a process-wide store
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sql").lower()

    # IANA name used to decide "today"; server local time when unset
    timezone: Optional[str] = os.getenv("APP_TIMEZONE") or None

    request_id_header: str = "X-Request-ID"

    # CORS: comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5000,"
                "http://127.0.0.1:3000,http://127.0.0.1:5000",
            ).split(",")
            if o.strip()
        ]
    )

    # Rate limiting
    rate_limit_enabled: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    rate_limit_per_minute: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "60"))
    import_rate_limit: str = os.getenv("IMPORT_RATE_LIMIT", "10/minute")

settings = Config()

# --- Startup validation ---
_logger = logging.getLogger(__name__)
if settings.storage_backend not in ("sql", "memory"):
    raise RuntimeError(
        f"FATAL: STORAGE_BACKEND must be 'sql' or 'memory', got '{settings.storage_backend}'."
    )
if settings.environment != "development" and settings.storage_backend == "memory":
    _logger.warning("⚠ In-memory storage selected outside development, data is lost on restart.")
