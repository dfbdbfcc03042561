"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"
SESSION_BACKENDS = {"memory", "supabase"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_data_dir: Path = DEFAULT_DATA_DIR
    catalog_customers_url: str | None = None
    catalog_places_url: str | None = None
    session_backend: str = "memory"
    session_namespace: str = "trip_quiz"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_session_table: str = "quiz_session_state"
    random_seed: int | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def uses_remote_catalog(self) -> bool:
        return bool(self.catalog_customers_url and self.catalog_places_url)


def parse_session_backend(raw: str | None) -> str:
    """Normalize the session backend name from env."""
    if raw is None:
        return "memory"
    cleaned = raw.strip().lower()
    if cleaned == "":
        return "memory"
    if cleaned not in SESSION_BACKENDS:
        raise ValueError(f"Unknown session backend: {raw!r}")
    return cleaned
