"""Shared fixtures for invoicebook tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from invoicebook.database import FileHelper, InFileInvoiceDatabase, InMemoryInvoiceDatabase, InvoiceLineSerializer
from invoicebook.database.mongo_database import MongoInvoiceDatabase
from invoicebook.generators import random_invoice
from invoicebook.models import Invoice
from tests.fakes.fake_mongo import FakeCollection


@pytest.fixture
def serializer() -> InvoiceLineSerializer:
    return InvoiceLineSerializer()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Location of the invoice file; the file itself does not exist yet."""
    return tmp_path / "invoice_database.txt"


@pytest.fixture
def in_file_db(db_path: Path) -> InFileInvoiceDatabase:
    return InFileInvoiceDatabase(FileHelper(db_path), InvoiceLineSerializer())


@pytest.fixture
def memory_db() -> InMemoryInvoiceDatabase:
    return InMemoryInvoiceDatabase()


@pytest.fixture
def sample_invoice() -> Invoice:
    return random_invoice("1", seller_name="Acme", buyer_name="Globex")


@pytest.fixture(params=["memory", "in-file", "mongodb"])
def any_db(request: pytest.FixtureRequest, tmp_path: Path):
    """Every backend behind the same contract."""
    if request.param == "memory":
        return InMemoryInvoiceDatabase()
    if request.param == "in-file":
        return InFileInvoiceDatabase(FileHelper(tmp_path / "contract.db"))
    return MongoInvoiceDatabase(FakeCollection())
