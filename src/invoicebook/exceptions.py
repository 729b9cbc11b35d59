"""Exception hierarchy for invoicebook."""

from __future__ import annotations


class InvoiceBookError(Exception):
    """Base exception for all invoicebook errors."""


class RecordDecodeError(InvoiceBookError):
    """A stored line could not be parsed into an invoice."""

    def __init__(self, message: str, raw_line: str = "") -> None:
        super().__init__(message)
        self.raw_line = raw_line


class DatabaseOperationError(InvoiceBookError):
    """Raised when a storage backend operation fails.

    Carries the failed operation name and, where applicable, the invoice id
    or the field value the operation was working on.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str = "",
        invoice_id: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.invoice_id = invoice_id
        self.field = field


class InvoiceServiceOperationError(InvoiceBookError):
    """Raised when the invoice service cannot complete a request."""


__all__ = [
    "InvoiceBookError",
    "RecordDecodeError",
    "DatabaseOperationError",
    "InvoiceServiceOperationError",
]
