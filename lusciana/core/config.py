"""
Configuration helpers for the Lusciana backend.

Everything the app needs from the environment (storage backend, GitHub
credentials, admin secret, CORS origins, paths) is read once into a frozen
Settings object so routers/services never touch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_CORS_ORIGINS = (
    "https://lusciana-build-team.vercel.app",
    "https://website-lusciana-frontend.vercel.app",
    "http://localhost:3000",
)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    port: int
    storage_backend: str
    data_dir: str
    github_token: str
    github_repo: str
    github_branch: str
    github_data_path: str
    github_api_url: str
    remote_timeout_seconds: int
    admin_password: str
    cors_origins: tuple[str, ...]
    public_dir: str
    log_level: str
    log_bodies: bool


def _int(value: str | None, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _csv(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        port=_int(os.getenv("PORT", "3000"), 3000),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "local").strip().lower(),
        data_dir=os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data")),
        github_token=os.getenv("GITHUB_TOKEN", ""),
        github_repo=os.getenv("GITHUB_REPO", "").strip().strip("/"),
        github_branch=os.getenv("GITHUB_BRANCH", "main"),
        github_data_path=os.getenv("GITHUB_DATA_PATH", "data").strip("/"),
        github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
        remote_timeout_seconds=_int(os.getenv("REMOTE_TIMEOUT_SECONDS", "10"), 10),
        admin_password=os.getenv("ADMIN_PASSWORD", "admin123"),
        cors_origins=_csv(os.getenv("CORS_ORIGINS"), DEFAULT_CORS_ORIGINS),
        public_dir=os.getenv("PUBLIC_DIR", os.path.join(os.getcwd(), "public")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_bodies=_bool(os.getenv("LOG_BODIES"), False),
    )
