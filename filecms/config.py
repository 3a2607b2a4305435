"""
Application configuration using pydantic-settings.
Loads from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FILECMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Storage layout (relative names resolve under data_dir)
    data_dir: Path = Path(".")
    users_file: str = "users.txt"
    index_file: str = "files.txt"
    content_dir: str = "files"
    audit_log_file: str = "log.txt"

    # Application
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR
    project_name: str = "File Content Management System"
    version: str = "1.0.0"

    @property
    def users_path(self) -> Path:
        return self.data_dir / self.users_file

    @property
    def index_path(self) -> Path:
        return self.data_dir / self.index_file

    @property
    def content_path(self) -> Path:
        return self.data_dir / self.content_dir

    @property
    def audit_log_path(self) -> Path:
        return self.data_dir / self.audit_log_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
