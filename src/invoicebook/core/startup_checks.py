"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invoicebook.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_file_backend(settings)
    _check_mongo_backend(settings)


def _check_file_backend(settings: AppSettings) -> None:
    """Reject an unusable file path and warn about ephemeral container disks."""
    if settings.database.backend != "in-file":
        return
    path = settings.database.file_path
    if not str(path).strip() or str(path) == ".":
        raise ValueError(
            "INVOICEBOOK_DATABASE_FILE_PATH is required for the in-file backend."
        )
    if path.is_dir():
        raise ValueError(f"INVOICEBOOK_DATABASE_FILE_PATH points at a directory: {path}")

    is_container = bool(
        os.environ.get("ECS_CONTAINER_METADATA_URI")
        or os.environ.get("KUBERNETES_SERVICE_HOST")
    )
    if is_container:
        log.warning(
            "INVOICEBOOK_DATABASE_BACKEND=in-file in a container environment. "
            "Invoices will be lost on container restart unless %s is on a mounted volume.",
            path,
        )


def _check_mongo_backend(settings: AppSettings) -> None:
    if settings.database.backend != "mongodb":
        return
    if not settings.database.mongo_uri.strip():
        raise ValueError("INVOICEBOOK_DATABASE_MONGO_URI is required for the mongodb backend.")
    if not settings.database.collection_name.strip():
        raise ValueError("INVOICEBOOK_DATABASE_COLLECTION_NAME must not be empty.")
