"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    asciisvg_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Quiet period before a queued generation runs (caller-side coalescing)
    asciisvg_debounce_ms: int = 150

    # Largest accepted source (markup or decoded upload), in bytes
    asciisvg_max_source_bytes: int = 20 * 1024 * 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
