"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: posts are stored in a
local SQLite file, seeded from the bundled JSON document, and comments
are fetched from the public JSONPlaceholder API.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# Directory of the ``app`` package; bundled data lives beneath it.
APP_DIR = Path(__file__).resolve().parent.parent

DEFAULT_SEED_DATA_PATH = str(APP_DIR / "data" / "posts.json")

STORAGE_BACKENDS = ("sqlite", "memory")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "VME Blog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs go to the console only.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path or connection string for the SQLite database.  A relative
    # path is resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "vme_blog.db")

    # Which post storage adapter to use: ``sqlite`` or ``memory``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite").lower()

    # JSON document loaded into an empty store at startup.
    seed_data_path: str = os.getenv("SEED_DATA_PATH", DEFAULT_SEED_DATA_PATH)

    # External comments service.  Only ``GET /comments`` is used.
    comments_api_base_url: str = os.getenv(
        "COMMENTS_API_BASE_URL", "https://jsonplaceholder.typicode.com"
    )
    comments_api_timeout: float = float(os.getenv("COMMENTS_API_TIMEOUT", "5.0"))

    graphiql_enabled: bool = _env_flag("GRAPHIQL_ENABLED", "true")

    # Used by ``run.py`` when serving with uvicorn.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
