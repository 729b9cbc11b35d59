"""MongoDB invoice database: one document per invoice in a collection."""

from __future__ import annotations

import logging
import threading
from typing import Any

from pydantic import ValidationError

from invoicebook.database.protocols import next_invoice_id
from invoicebook.exceptions import DatabaseOperationError
from invoicebook.models import Invoice

log = logging.getLogger(__name__)


class MongoInvoiceDatabase:
    """Stores invoices in a MongoDB collection keyed by ``_id``.

    The collection is injected so tests can pass a fake. Use
    :meth:`from_settings` to build one from a connection URI. Documents that
    do not validate as an invoice are treated like malformed lines of the
    in-file store: skipped by reads and counts, absent for deletes.
    """

    def __init__(self, collection: Any) -> None:
        self._collection = collection
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, uri: str, database: str, collection_name: str) -> MongoInvoiceDatabase:
        try:
            import pymongo
        except ImportError as e:
            raise ImportError(
                "pymongo is required for the MongoDB backend. "
                "Install with: pip install invoicebook[mongodb]"
            ) from e

        client = pymongo.MongoClient(uri)
        return cls(client[database][collection_name])

    @staticmethod
    def _to_document(invoice: Invoice) -> dict[str, Any]:
        doc = invoice.model_dump(mode="json", exclude={"id"})
        doc["_id"] = invoice.id
        return doc

    @staticmethod
    def _from_document(doc: dict[str, Any]) -> Invoice:
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return Invoice.model_validate(data)

    @classmethod
    def _try_from_document(cls, doc: dict[str, Any]) -> Invoice | None:
        try:
            return cls._from_document(doc)
        except ValidationError:
            log.debug("Skipping undecodable document: %s", doc.get("_id"))
            return None

    def _find(self, query: dict[str, Any]) -> list[Invoice]:
        """Decodable matches in natural order; invalid documents are skipped."""
        cursor = self._collection.find(query).sort("$natural", 1)
        return [inv for inv in map(self._try_from_document, cursor) if inv is not None]

    def save(self, invoice: Invoice) -> Invoice:
        with self._lock:
            try:
                if invoice.id is None:
                    invoice = invoice.with_id(next_invoice_id(self._find({})))
                self._collection.replace_one({"_id": invoice.id}, self._to_document(invoice), upsert=True)
                log.debug("Saved invoice %s to collection", invoice.id)
                return invoice
            except Exception as e:
                raise DatabaseOperationError(
                    f"Encountered problems saving invoice: {invoice.id}",
                    operation="save",
                    invoice_id=invoice.id,
                ) from e

    def find_by_id(self, invoice_id: str) -> Invoice | None:
        with self._lock:
            try:
                doc = self._collection.find_one({"_id": invoice_id})
                return self._try_from_document(doc) if doc is not None else None
            except Exception as e:
                raise DatabaseOperationError(
                    f"Encountered problems while searching for invoice: {invoice_id}",
                    operation="find_by_id",
                    invoice_id=invoice_id,
                ) from e

    def exists_by_id(self, invoice_id: str) -> bool:
        with self._lock:
            try:
                doc = self._collection.find_one({"_id": invoice_id})
                return doc is not None and self._try_from_document(doc) is not None
            except Exception as e:
                raise DatabaseOperationError(
                    f"Encountered problems while searching for invoice: {invoice_id}",
                    operation="exists_by_id",
                    invoice_id=invoice_id,
                ) from e

    def find_all(self) -> list[Invoice]:
        with self._lock:
            try:
                return self._find({})
            except Exception as e:
                raise DatabaseOperationError(
                    "Encountered problems while searching for invoices.",
                    operation="find_all",
                ) from e

    def find_all_by_seller_name(self, seller_name: str) -> list[Invoice]:
        with self._lock:
            try:
                return self._find({"seller.name": seller_name})
            except Exception as e:
                raise DatabaseOperationError(
                    f"Encountered problems while searching for invoices with seller name: {seller_name}",
                    operation="find_all_by_seller_name",
                    field="seller name",
                ) from e

    def find_all_by_buyer_name(self, buyer_name: str) -> list[Invoice]:
        with self._lock:
            try:
                return self._find({"buyer.name": buyer_name})
            except Exception as e:
                raise DatabaseOperationError(
                    f"Encountered problems while searching for invoices with buyer name: {buyer_name}",
                    operation="find_all_by_buyer_name",
                    field="buyer name",
                ) from e

    def count(self) -> int:
        with self._lock:
            try:
                return len(self._find({}))
            except Exception as e:
                raise DatabaseOperationError(
                    "Encountered problems while counting invoices.",
                    operation="count",
                ) from e

    def delete_by_id(self, invoice_id: str) -> None:
        with self._lock:
            try:
                doc = self._collection.find_one({"_id": invoice_id})
                removed = doc is not None and self._try_from_document(doc) is not None
                if removed:
                    self._collection.delete_one({"_id": invoice_id})
            except Exception as e:
                raise DatabaseOperationError(
                    f"Encountered problems while deleting invoice: {invoice_id}",
                    operation="delete_by_id",
                    invoice_id=invoice_id,
                ) from e
            if not removed:
                raise DatabaseOperationError(
                    f"There is no invoice with id: {invoice_id} present in database. Nothing was removed.",
                    operation="delete_by_id",
                    invoice_id=invoice_id,
                )

    def delete_all(self) -> None:
        with self._lock:
            try:
                self._collection.delete_many({})
            except Exception as e:
                raise DatabaseOperationError(
                    "Encountered problem while deleting invoices.",
                    operation="delete_all",
                ) from e
