"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgnotes_log_level: str = "info"

    # First id handed out by Document.parse. Documents written by earlier
    # releases were numbered from 2.
    svgnotes_first_element_id: int = 2

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Root logging setup for applications embedding the codec. Never run on import."""
    level = level or settings.svgnotes_log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
