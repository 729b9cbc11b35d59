"""In-file invoice database: one JSON invoice per line of a text file."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from invoicebook.database.file_helper import FileHelper
from invoicebook.database.protocols import next_invoice_id
from invoicebook.database.serializer import InvoiceLineSerializer
from invoicebook.exceptions import DatabaseOperationError
from invoicebook.models import Invoice

log = logging.getLogger(__name__)


class InFileInvoiceDatabase:
    """Stores invoices as lines of a flat file.

    Lines that do not decode into an invoice are invisible to every read
    and are carried through rewrites untouched. Inserts append a line,
    updates and deletes rewrite the whole file. Every operation holds the
    instance lock for its full read-modify-write cycle.
    """

    def __init__(self, file_helper: FileHelper, serializer: InvoiceLineSerializer | None = None) -> None:
        self._file = file_helper
        self._serializer = serializer or InvoiceLineSerializer()
        self._lock = threading.Lock()

    def _scan(self) -> list[tuple[int, str, Invoice | None]]:
        """(line index, raw line, decoded invoice or None) for every line."""
        return [(i, line, self._serializer.try_decode(line)) for i, line in enumerate(self._file.read_lines())]

    def _decoded(self) -> list[Invoice]:
        return [invoice for _, _, invoice in self._scan() if invoice is not None]

    def save(self, invoice: Invoice) -> Invoice:
        with self._lock:
            try:
                if not self._file.exists():
                    self._file.create()
                rows = self._scan()
                if invoice.id is None:
                    invoice = invoice.with_id(next_invoice_id([inv for _, _, inv in rows if inv is not None]))
                encoded = self._serializer.encode(invoice)

                position = next(
                    (i for i, _, stored in rows if stored is not None and stored.id == invoice.id),
                    None,
                )
                if position is None:
                    self._file.append_line(encoded)
                    log.debug("Appended invoice %s to %s", invoice.id, self._file.path)
                else:
                    lines = [line for _, line, _ in rows]
                    lines[position] = encoded
                    self._file.write_lines(lines)
                    log.debug("Replaced invoice %s at line %d of %s", invoice.id, position + 1, self._file.path)
                return invoice
            except OSError as e:
                log.warning("Saving invoice %s failed", invoice.id, exc_info=True)
                raise DatabaseOperationError(
                    f"Encountered problems saving invoice: {invoice.id}",
                    operation="save",
                    invoice_id=invoice.id,
                ) from e

    def find_by_id(self, invoice_id: str) -> Invoice | None:
        with self._lock:
            try:
                return next((inv for inv in self._decoded() if inv.id == invoice_id), None)
            except OSError as e:
                raise DatabaseOperationError(
                    f"Encountered problems while searching for invoice: {invoice_id}",
                    operation="find_by_id",
                    invoice_id=invoice_id,
                ) from e

    def exists_by_id(self, invoice_id: str) -> bool:
        with self._lock:
            try:
                return any(inv.id == invoice_id for inv in self._decoded())
            except OSError as e:
                raise DatabaseOperationError(
                    f"Encountered problems while searching for invoice: {invoice_id}",
                    operation="exists_by_id",
                    invoice_id=invoice_id,
                ) from e

    def find_all(self) -> list[Invoice]:
        with self._lock:
            try:
                return self._decoded()
            except OSError as e:
                raise DatabaseOperationError(
                    "Encountered problems while searching for invoices.",
                    operation="find_all",
                ) from e

    def find_all_by_field(self, field_getter: Callable[[Invoice], str], value: str, *, field: str = "") -> list[Invoice]:
        """Invoices for which ``field_getter(invoice) == value``, in file order."""
        with self._lock:
            try:
                return [inv for inv in self._decoded() if field_getter(inv) == value]
            except OSError as e:
                raise DatabaseOperationError(
                    f"Encountered problems while searching for invoices with {field or 'field'}: {value}",
                    operation="find_all_by_field",
                    field=field or None,
                ) from e

    def find_all_by_seller_name(self, seller_name: str) -> list[Invoice]:
        return self.find_all_by_field(lambda inv: inv.seller.name, seller_name, field="seller name")

    def find_all_by_buyer_name(self, buyer_name: str) -> list[Invoice]:
        return self.find_all_by_field(lambda inv: inv.buyer.name, buyer_name, field="buyer name")

    def count(self) -> int:
        with self._lock:
            try:
                return len(self._decoded())
            except OSError as e:
                raise DatabaseOperationError(
                    "Encountered problems while counting invoices.",
                    operation="count",
                ) from e

    def delete_by_id(self, invoice_id: str) -> None:
        with self._lock:
            try:
                rows = self._scan()
                kept = [line for _, line, inv in rows if inv is None or inv.id != invoice_id]
                if len(kept) == len(rows):
                    raise DatabaseOperationError(
                        f"There is no invoice with id: {invoice_id} present in database. Nothing was removed.",
                        operation="delete_by_id",
                        invoice_id=invoice_id,
                    )
                self._file.write_lines(kept)
                log.debug("Deleted invoice %s from %s", invoice_id, self._file.path)
            except OSError as e:
                log.warning("Deleting invoice %s failed", invoice_id, exc_info=True)
                raise DatabaseOperationError(
                    f"Encountered problems while deleting invoice: {invoice_id}",
                    operation="delete_by_id",
                    invoice_id=invoice_id,
                ) from e

    def delete_all(self) -> None:
        with self._lock:
            try:
                self._file.clear()
                log.info("Cleared invoice file %s", self._file.path)
            except OSError as e:
                raise DatabaseOperationError(
                    "Encountered problem while deleting invoices.",
                    operation="delete_all",
                ) from e
