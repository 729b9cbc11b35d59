"""Invoice use cases on top of a storage backend."""

from __future__ import annotations

import logging

from invoicebook.database.protocols import IInvoiceDatabase
from invoicebook.exceptions import DatabaseOperationError, InvoiceServiceOperationError
from invoicebook.models import Invoice

log = logging.getLogger(__name__)


class InvoiceService:
    """Thin policy layer between the API/CLI and the configured database.

    Every ``DatabaseOperationError`` is re-raised as
    ``InvoiceServiceOperationError`` with the original chained.
    """

    def __init__(self, database: IInvoiceDatabase) -> None:
        self._db = database

    def get_all_invoices(self) -> list[Invoice]:
        try:
            return self._db.find_all()
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError("An error occurred during getting all invoices.") from e

    def get_all_invoices_by_seller_name(self, seller_name: str) -> list[Invoice]:
        try:
            return self._db.find_all_by_seller_name(seller_name)
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError(
                f"An error occurred during getting invoices by seller name: {seller_name}"
            ) from e

    def get_all_invoices_by_buyer_name(self, buyer_name: str) -> list[Invoice]:
        try:
            return self._db.find_all_by_buyer_name(buyer_name)
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError(
                f"An error occurred during getting invoices by buyer name: {buyer_name}"
            ) from e

    def get_invoice(self, invoice_id: str) -> Invoice | None:
        try:
            return self._db.find_by_id(invoice_id)
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError(f"An error occurred during getting invoice: {invoice_id}") from e

    def invoice_exists(self, invoice_id: str) -> bool:
        try:
            return self._db.exists_by_id(invoice_id)
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError(
                f"An error occurred during checking if invoice exists: {invoice_id}"
            ) from e

    def add_invoice(self, invoice: Invoice) -> Invoice:
        """Store a new invoice. An invoice without an id gets one assigned."""
        try:
            if invoice.id is not None and self._db.exists_by_id(invoice.id):
                raise InvoiceServiceOperationError(f"Invoice already exists: {invoice.id}")
            saved = self._db.save(invoice)
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError("An error occurred during adding invoice.") from e
        log.info("Added invoice %s", saved.id)
        return saved

    def update_invoice(self, invoice: Invoice) -> Invoice:
        if invoice.id is None:
            raise InvoiceServiceOperationError("Cannot update an invoice without an id.")
        try:
            if not self._db.exists_by_id(invoice.id):
                raise InvoiceServiceOperationError(f"Invoice does not exist: {invoice.id}")
            saved = self._db.save(invoice)
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError(f"An error occurred during updating invoice: {invoice.id}") from e
        log.info("Updated invoice %s", saved.id)
        return saved

    def delete_invoice(self, invoice_id: str) -> None:
        try:
            self._db.delete_by_id(invoice_id)
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError(f"An error occurred during deleting invoice: {invoice_id}") from e
        log.info("Deleted invoice %s", invoice_id)

    def delete_all_invoices(self) -> None:
        try:
            self._db.delete_all()
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError("An error occurred during deleting all invoices.") from e
        log.info("Deleted all invoices")

    def count(self) -> int:
        try:
            return self._db.count()
        except DatabaseOperationError as e:
            raise InvoiceServiceOperationError("An error occurred during counting invoices.") from e
