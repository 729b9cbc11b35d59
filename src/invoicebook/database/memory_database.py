"""In-memory invoice database: dict-backed, ideal for tests."""

from __future__ import annotations

import logging
import threading

from invoicebook.database.protocols import next_invoice_id
from invoicebook.exceptions import DatabaseOperationError
from invoicebook.models import Invoice

log = logging.getLogger(__name__)


class InMemoryInvoiceDatabase:
    """Stores invoices in an insertion-ordered dict; nothing touches disk.

    Records are deep-copied in and out, so callers never share state with
    the store. Replacing an existing id keeps its original position. With
    ``strict_delete`` (the default) deleting an unknown id raises like the
    in-file database does; with ``strict_delete=False`` it is a no-op.
    """

    def __init__(self, *, strict_delete: bool = True) -> None:
        self._store: dict[str, Invoice] = {}
        self._strict_delete = strict_delete
        self._lock = threading.Lock()

    def save(self, invoice: Invoice) -> Invoice:
        with self._lock:
            if invoice.id is None:
                invoice = invoice.with_id(next_invoice_id(list(self._store.values())))
            self._store[invoice.id] = invoice.model_copy(deep=True)
            log.debug("Saved invoice %s to memory store", invoice.id)
            return invoice

    def find_by_id(self, invoice_id: str) -> Invoice | None:
        with self._lock:
            stored = self._store.get(invoice_id)
            return stored.model_copy(deep=True) if stored is not None else None

    def exists_by_id(self, invoice_id: str) -> bool:
        with self._lock:
            return invoice_id in self._store

    def find_all(self) -> list[Invoice]:
        with self._lock:
            return [inv.model_copy(deep=True) for inv in self._store.values()]

    def find_all_by_seller_name(self, seller_name: str) -> list[Invoice]:
        with self._lock:
            return [inv.model_copy(deep=True) for inv in self._store.values() if inv.seller.name == seller_name]

    def find_all_by_buyer_name(self, buyer_name: str) -> list[Invoice]:
        with self._lock:
            return [inv.model_copy(deep=True) for inv in self._store.values() if inv.buyer.name == buyer_name]

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    def delete_by_id(self, invoice_id: str) -> None:
        with self._lock:
            if invoice_id not in self._store:
                if self._strict_delete:
                    raise DatabaseOperationError(
                        f"There is no invoice with id: {invoice_id} present in database. Nothing was removed.",
                        operation="delete_by_id",
                        invoice_id=invoice_id,
                    )
                return
            del self._store[invoice_id]

    def delete_all(self) -> None:
        with self._lock:
            self._store.clear()
