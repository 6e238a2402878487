"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    chameleon_env: str = "development"
    chameleon_log_level: str = "info"

    # Input directory used by the CLI when none is given
    chameleon_default_path: str = "./"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
