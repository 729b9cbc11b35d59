"""Pluggable storage backends for invoices."""

from __future__ import annotations

from invoicebook.database.factory import create_database
from invoicebook.database.file_helper import FileHelper
from invoicebook.database.in_file_database import InFileInvoiceDatabase
from invoicebook.database.memory_database import InMemoryInvoiceDatabase
from invoicebook.database.protocols import IInvoiceDatabase
from invoicebook.database.serializer import InvoiceLineSerializer

__all__ = [
    "IInvoiceDatabase",
    "FileHelper",
    "InvoiceLineSerializer",
    "InFileInvoiceDatabase",
    "InMemoryInvoiceDatabase",
    "create_database",
]
