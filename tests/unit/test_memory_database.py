"""Tests for InMemoryInvoiceDatabase."""

from __future__ import annotations

import threading

import pytest

from invoicebook.database.memory_database import InMemoryInvoiceDatabase
from invoicebook.exceptions import DatabaseOperationError
from invoicebook.generators import random_invoice


class TestInMemoryInvoiceDatabase:
    def test_empty(self, memory_db: InMemoryInvoiceDatabase) -> None:
        assert memory_db.find_all() == []
        assert memory_db.count() == 0
        assert memory_db.find_by_id("1") is None
        assert memory_db.exists_by_id("1") is False

    def test_save_and_exists(self, memory_db: InMemoryInvoiceDatabase) -> None:
        invoice = random_invoice("1")
        memory_db.save(invoice)
        assert memory_db.exists_by_id("1")
        assert not memory_db.exists_by_id("2")

    def test_count(self, memory_db: InMemoryInvoiceDatabase) -> None:
        for i in range(5):
            memory_db.save(random_invoice(str(i)))
        assert memory_db.count() == 5

    def test_find_by_id(self, memory_db: InMemoryInvoiceDatabase) -> None:
        inv1, inv2 = random_invoice("1"), random_invoice("2")
        memory_db.save(inv1)
        memory_db.save(inv2)
        assert memory_db.find_by_id("1") == inv1
        assert memory_db.find_by_id("2") == inv2

    def test_find_all_in_insertion_order(self, memory_db: InMemoryInvoiceDatabase) -> None:
        invoices = [random_invoice(str(i)) for i in (9, 2, 5)]
        for inv in invoices:
            memory_db.save(inv)
        assert memory_db.find_all() == invoices

    def test_update_keeps_position(self, memory_db: InMemoryInvoiceDatabase) -> None:
        inv1, inv2, inv3 = random_invoice("1"), random_invoice("2"), random_invoice("3")
        for inv in (inv1, inv2, inv3):
            memory_db.save(inv)
        updated = random_invoice("1", seller_name="Updated")
        memory_db.save(updated)
        assert memory_db.find_all() == [updated, inv2, inv3]
        assert memory_db.count() == 3

    def test_find_all_by_seller_name(self, memory_db: InMemoryInvoiceDatabase) -> None:
        same = [random_invoice(str(i), seller_name="sampleSellerABC") for i in (1, 2, 3)]
        others = [random_invoice(str(i), seller_name="Other") for i in (4, 5, 6)]
        for inv in [same[0], others[0], same[1], others[1], same[2], others[2]]:
            memory_db.save(inv)
        assert memory_db.find_all_by_seller_name("sampleSellerABC") == same

    def test_find_all_by_buyer_name(self, memory_db: InMemoryInvoiceDatabase) -> None:
        same = [random_invoice(str(i), buyer_name="sampleBuyerABC") for i in (1, 2, 3)]
        for inv in same:
            memory_db.save(inv)
        memory_db.save(random_invoice("4", buyer_name="Other"))
        assert memory_db.find_all_by_buyer_name("sampleBuyerABC") == same
        assert memory_db.find_all_by_buyer_name("Nobody") == []

    def test_assigns_ids(self, memory_db: InMemoryInvoiceDatabase) -> None:
        assert memory_db.save(random_invoice()).id == "1"
        memory_db.save(random_invoice("10"))
        assert memory_db.save(random_invoice()).id == "11"

    def test_delete_by_id(self, memory_db: InMemoryInvoiceDatabase) -> None:
        memory_db.save(random_invoice("1"))
        memory_db.delete_by_id("1")
        assert not memory_db.exists_by_id("1")

    def test_delete_all(self, memory_db: InMemoryInvoiceDatabase) -> None:
        for i in range(3):
            memory_db.save(random_invoice(str(i)))
        memory_db.delete_all()
        memory_db.delete_all()
        assert memory_db.count() == 0
        assert memory_db.find_all() == []


class TestDeleteMissingPolicy:
    def test_strict_by_default(self) -> None:
        db = InMemoryInvoiceDatabase()
        db.save(random_invoice("1"))
        with pytest.raises(DatabaseOperationError) as exc_info:
            db.delete_by_id("2")
        assert exc_info.value.invoice_id == "2"
        assert db.count() == 1

    def test_lenient_is_noop(self) -> None:
        db = InMemoryInvoiceDatabase(strict_delete=False)
        db.save(random_invoice("1"))
        db.delete_by_id("2")
        assert db.count() == 1
        assert not db.exists_by_id("2")


class TestConcurrency:
    def test_parallel_id_assignment_is_unique(self) -> None:
        db = InMemoryInvoiceDatabase()
        threads = [threading.Thread(target=db.save, args=(random_invoice(),)) for _ in range(50)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert db.count() == 50
        assert sorted(int(inv.id) for inv in db.find_all()) == list(range(1, 51))
