"""Build the configured invoice database."""

from __future__ import annotations

import logging

from invoicebook.core.config import DatabaseConfig
from invoicebook.database.file_helper import FileHelper
from invoicebook.database.in_file_database import InFileInvoiceDatabase
from invoicebook.database.memory_database import InMemoryInvoiceDatabase
from invoicebook.database.protocols import IInvoiceDatabase
from invoicebook.database.serializer import InvoiceLineSerializer

log = logging.getLogger(__name__)


def create_database(config: DatabaseConfig) -> IInvoiceDatabase:
    """Return the backend named by ``config.backend``."""
    if config.backend == "in-file":
        log.info("Using in-file invoice database at %s", config.file_path)
        return InFileInvoiceDatabase(FileHelper(config.file_path), InvoiceLineSerializer())

    if config.backend == "mongodb":
        from invoicebook.database.mongo_database import MongoInvoiceDatabase

        log.info("Using MongoDB invoice database, collection %s", config.collection_name)
        return MongoInvoiceDatabase.from_settings(
            config.mongo_uri, config.mongo_database, config.collection_name
        )

    log.info("Using in-memory invoice database")
    return InMemoryInvoiceDatabase(strict_delete=config.strict_delete)
