from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    VENDOR_STORE_PATH: str = "data/vendors.json"

    LOG_DIR: str = "logs"
    LOG_FILE: str = "wallcover.log"
    LOG_LEVEL: str = "INFO"
    LOG_MAX_BYTES: int = 5 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 3

    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    CORS_ORIGINS: list[str] = ["*"]


def resolve_path(path: str | Path) -> Path:
    """Relative paths are anchored at the project root, absolute ones kept."""
    path = Path(path)
    if path.is_absolute():
        return path
    return PROJECT_ROOT / path


settings = Settings()
