"""invoicebook: invoice storage behind one contract with interchangeable backends.

Usage::

    from invoicebook import FileHelper, InFileInvoiceDatabase, InvoiceService

    db = InFileInvoiceDatabase(FileHelper("invoices.db"))
    service = InvoiceService(db)
"""

from __future__ import annotations

from invoicebook.core.config import AppSettings
from invoicebook.database import (
    FileHelper,
    IInvoiceDatabase,
    InFileInvoiceDatabase,
    InMemoryInvoiceDatabase,
    InvoiceLineSerializer,
    create_database,
)
from invoicebook.exceptions import (
    DatabaseOperationError,
    InvoiceBookError,
    InvoiceServiceOperationError,
    RecordDecodeError,
)
from invoicebook.models import (
    AccountNumber,
    Address,
    Company,
    ContactDetails,
    Invoice,
    InvoiceEntry,
    UnitType,
    Vat,
)
from invoicebook.services import InvoiceService

__all__ = [
    "AppSettings",
    "AccountNumber",
    "Address",
    "Company",
    "ContactDetails",
    "Invoice",
    "InvoiceEntry",
    "UnitType",
    "Vat",
    "IInvoiceDatabase",
    "FileHelper",
    "InvoiceLineSerializer",
    "InFileInvoiceDatabase",
    "InMemoryInvoiceDatabase",
    "create_database",
    "InvoiceService",
    "InvoiceBookError",
    "RecordDecodeError",
    "DatabaseOperationError",
    "InvoiceServiceOperationError",
]
