"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathcmds_env: str = "development"
    pathcmds_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Longest d string the API will parse
    max_path_length: int = 1_000_000

    # Decimal places when writing commands back out as path data
    default_precision: int = 6

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def get_settings() -> Settings:
    return settings


def configure_logging(level: str | None = None) -> None:
    name = (level or settings.pathcmds_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
