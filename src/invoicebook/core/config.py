"""Nested pydantic-settings configuration for the application.

Each sub-config reads its own ``INVOICEBOOK_<GROUP>_*`` env vars, so
``AppSettings().database.backend`` maps to ``INVOICEBOOK_DATABASE_BACKEND``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class DatabaseConfig(BaseSettings):
    """Storage backend configuration.

    Env vars use ``INVOICEBOOK_DATABASE_`` prefix::

        export INVOICEBOOK_DATABASE_BACKEND=in-file
        export INVOICEBOOK_DATABASE_FILE_PATH=./data/invoices.db
    """

    model_config = {"env_prefix": "INVOICEBOOK_DATABASE_"}

    backend: Literal["memory", "in-file", "mongodb"] = "memory"
    file_path: Path = Path("./data/invoices.db")
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "invoicebook"
    collection_name: str = "invoices"
    # False makes memory-backend delete of an unknown id a silent no-op
    strict_delete: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``INVOICEBOOK_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "INVOICEBOOK_OBSERVABILITY_"}

    log_level: str = "INFO"
    json_logs: bool | None = None


class APIConfig(BaseSettings):
    """HTTP API configuration.

    Env vars use ``INVOICEBOOK_API_`` prefix.
    """

    model_config = {"env_prefix": "INVOICEBOOK_API_"}

    title: str = "invoicebook"
    description: str = "Invoice storage over interchangeable backends"
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    api: APIConfig = Field(default_factory=APIConfig)
