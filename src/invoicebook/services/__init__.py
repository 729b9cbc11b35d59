"""Application services."""

from __future__ import annotations

from invoicebook.services.invoice_service import InvoiceService

__all__ = ["InvoiceService"]
