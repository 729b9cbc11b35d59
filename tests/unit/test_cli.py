"""Tests for the invoicebook CLI using an in-file store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from invoicebook.cli.main import app
from invoicebook.database import FileHelper, InFileInvoiceDatabase
from invoicebook.generators import random_invoice

runner = CliRunner()


@pytest.fixture()
def store(tmp_path: Path) -> Path:
    path = tmp_path / "cli.db"
    db = InFileInvoiceDatabase(FileHelper(path))
    db.save(random_invoice("1", seller_name="Acme"))
    db.save(random_invoice("2", seller_name="Globex"))
    return path


class TestReadCommands:
    def test_count(self, store: Path):
        result = runner.invoke(app, ["count", "--file", str(store)])
        assert result.exit_code == 0
        assert result.output.strip() == "2"

    def test_list(self, store: Path):
        result = runner.invoke(app, ["list", "--file", str(store)])
        assert result.exit_code == 0
        assert "Invoices (2)" in result.output

    def test_list_by_seller(self, store: Path):
        result = runner.invoke(app, ["list", "--seller", "Acme", "--file", str(store)])
        assert result.exit_code == 0
        assert "Invoices (1)" in result.output

    def test_show(self, store: Path):
        result = runner.invoke(app, ["show", "2", "--file", str(store)])
        assert result.exit_code == 0
        assert json.loads(result.output)["seller"]["name"] == "Globex"

    def test_show_missing(self, store: Path):
        result = runner.invoke(app, ["show", "9", "--file", str(store)])
        assert result.exit_code == 1

    def test_directory_is_bad_parameter(self, tmp_path: Path):
        result = runner.invoke(app, ["count", "--file", str(tmp_path)])
        assert result.exit_code != 0


class TestWriteCommands:
    def test_seed_assigns_following_ids(self, store: Path):
        result = runner.invoke(app, ["seed", "3", "--file", str(store)])
        assert result.exit_code == 0
        ids = [inv.id for inv in InFileInvoiceDatabase(FileHelper(store)).find_all()]
        assert ids == ["1", "2", "3", "4", "5"]

    def test_delete(self, store: Path):
        result = runner.invoke(app, ["delete", "1", "--file", str(store)])
        assert result.exit_code == 0
        assert [inv.id for inv in InFileInvoiceDatabase(FileHelper(store)).find_all()] == ["2"]

    def test_delete_missing_fails(self, store: Path):
        result = runner.invoke(app, ["delete", "7", "--file", str(store)])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert InFileInvoiceDatabase(FileHelper(store)).count() == 2

    def test_purge_requires_yes(self, store: Path):
        result = runner.invoke(app, ["purge", "--file", str(store)])
        assert result.exit_code == 1
        assert InFileInvoiceDatabase(FileHelper(store)).count() == 2

    def test_purge(self, store: Path):
        result = runner.invoke(app, ["purge", "--yes", "--file", str(store)])
        assert result.exit_code == 0
        assert store.read_text(encoding="utf-8") == ""


class TestBackendSelection:
    def test_memory_backend_rejected(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("INVOICEBOOK_DATABASE_BACKEND", raising=False)
        result = runner.invoke(app, ["count"])
        assert result.exit_code == 2

    def test_configured_file_backend(self, store: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("INVOICEBOOK_DATABASE_BACKEND", "in-file")
        monkeypatch.setenv("INVOICEBOOK_DATABASE_FILE_PATH", str(store))
        runner.invoke(app, ["seed", "1"])
        result = runner.invoke(app, ["count"])
        assert result.exit_code == 0
        assert result.output.strip() == "3"
