import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    fallback_task_text: str = "task-item"  # Content and localId of a task item with no text at all
    max_workers: int = 1  # >1 converts top-level list items on a thread pool

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="ADFCONV_",
        env_file=[os.getenv("ENV_FILE", ""), ".env"],
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings from the environment, loaded once per process."""
    return Settings()
