"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: backend/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# Load .env into environment BEFORE pydantic reads. override=True ensures .env
# values override any shell env.
# When .env doesn't exist (prod), this is a no-op; platform env vars are used.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "CareerPortal"
    app_version: str = "1.0.0"
    port: int = 8001
    cors_origins: list[str] = ["*"]

    # Database
    database_url: str = "sqlite:///./career_portal.db"
    database_echo: bool = False

    # Identity cookies (studentId / employerId / adminId)
    identity_cookie_max_age: int = 60 * 60 * 24 * 7  # 1 week
    cookie_secure: bool = False

    # Password hashing
    bcrypt_rounds: int = 10

    # Redis
    redis_url: str = ""

    # Cache TTLs (seconds)
    analytics_cache_ttl: int = 60

    # Business rules
    max_active_jobs_per_employer: int = 5

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, business config) ---

# Identity cookie names, in resolution priority order
STUDENT_COOKIE: str = "studentId"
EMPLOYER_COOKIE: str = "employerId"
ADMIN_COOKIE: str = "adminId"
IDENTITY_COOKIES: tuple[str, ...] = (STUDENT_COOKIE, EMPLOYER_COOKIE, ADMIN_COOKIE)

# Default page sizes per list endpoint
DEFAULT_PAGE_SIZE: int = 10
EVENTS_PAGE_SIZE: int = 9
RESOURCES_PAGE_SIZE: int = 12

# Analytics
TOP_PAGES_LIMIT: int = 10
