"""Notes Manager configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server settings loaded from NOTES_* variables or a .env file."""

    model_config = {
        "env_prefix": "NOTES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    server_name: str = "notes-manager"
    server_version: str = "1.0.0"
    log_level: str = "INFO"

    # Insert the two sample notes at startup
    seed_notes: bool = True


settings = Settings()
