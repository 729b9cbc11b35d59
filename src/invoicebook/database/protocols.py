"""Invoice database protocol: defines the contract all backends implement."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from invoicebook.models import Invoice


@runtime_checkable
class IInvoiceDatabase(Protocol):
    """Protocol for invoice storage backends (in-file, memory, MongoDB).

    Reads report absence as ``None``, ``False``, an empty list or ``0``.
    Mutations and I/O failures raise ``DatabaseOperationError``.
    """

    def save(self, invoice: Invoice) -> Invoice:
        """Insert or fully replace an invoice and return the stored record.

        An invoice without an id is assigned the next free numeric id.
        """
        ...

    def find_by_id(self, invoice_id: str) -> Invoice | None:
        """Return the invoice with this id, or ``None``."""
        ...

    def exists_by_id(self, invoice_id: str) -> bool:
        """Check if an invoice with this id is stored."""
        ...

    def find_all(self) -> list[Invoice]:
        """Return every stored invoice in storage order."""
        ...

    def find_all_by_seller_name(self, seller_name: str) -> list[Invoice]:
        """Return invoices whose seller name equals ``seller_name`` exactly."""
        ...

    def find_all_by_buyer_name(self, buyer_name: str) -> list[Invoice]:
        """Return invoices whose buyer name equals ``buyer_name`` exactly."""
        ...

    def count(self) -> int:
        """Number of stored invoices."""
        ...

    def delete_by_id(self, invoice_id: str) -> None:
        """Remove one invoice. Raises if no invoice has this id."""
        ...

    def delete_all(self) -> None:
        """Remove every invoice (no-op on an empty store)."""
        ...


def next_invoice_id(invoices: list[Invoice]) -> str:
    """One greater than the largest numeric id present, ``"1"`` when none."""
    highest = 0
    for invoice in invoices:
        if invoice.id is not None and invoice.id.isdigit():
            highest = max(highest, int(invoice.id))
    return str(highest + 1)
