"""CLI for invoicebook: inspect and maintain the configured invoice store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from invoicebook.core.config import AppSettings
from invoicebook.core.startup_checks import validate_settings
from invoicebook.database import create_database
from invoicebook.exceptions import InvoiceServiceOperationError
from invoicebook.generators import random_invoice
from invoicebook.models import Invoice
from invoicebook.services import InvoiceService

app = typer.Typer(name="invoicebook", help="Invoice storage over interchangeable backends")
console = Console()


def _build_service(file: Optional[Path], verbose: bool) -> InvoiceService:
    """Build the service, forcing the in-file backend when ``--file`` is given."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    settings = AppSettings()
    if file is not None:
        settings.database.backend = "in-file"
        settings.database.file_path = file
    if settings.database.backend == "memory":
        # each CLI invocation would start from an empty store
        raise typer.BadParameter(
            "The memory backend does not persist between commands. "
            "Pass --file or set INVOICEBOOK_DATABASE_BACKEND to in-file or mongodb."
        )
    try:
        validate_settings(settings)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    return InvoiceService(create_database(settings.database))


def _invoice_table(invoices: list[Invoice]) -> Table:
    table = Table(title=f"Invoices ({len(invoices)})")
    table.add_column("ID", style="cyan")
    table.add_column("Number")
    table.add_column("Issued")
    table.add_column("Seller")
    table.add_column("Buyer")
    table.add_column("Gross", justify="right")
    for inv in invoices:
        gross = sum((e.gross_value for e in inv.entries), start=0)
        table.add_row(
            inv.id or "",
            inv.number,
            inv.issued_date.isoformat(),
            inv.seller.name,
            inv.buyer.name,
            f"{gross:.2f}",
        )
    return table


def _fail(exc: InvoiceServiceOperationError) -> NoReturn:
    console.print(f"[red]Error:[/red] {exc}")
    if exc.__cause__ is not None:
        console.print(f"[dim]{exc.__cause__}[/dim]")
    raise typer.Exit(code=1)


@app.command("list")
def list_invoices(
    seller: Optional[str] = typer.Option(None, help="Only invoices with this exact seller name"),
    buyer: Optional[str] = typer.Option(None, help="Only invoices with this exact buyer name"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Invoice file (forces in-file backend)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """List stored invoices."""
    service = _build_service(file, verbose)
    try:
        if seller is not None:
            invoices = service.get_all_invoices_by_seller_name(seller)
        elif buyer is not None:
            invoices = service.get_all_invoices_by_buyer_name(buyer)
        else:
            invoices = service.get_all_invoices()
    except InvoiceServiceOperationError as e:
        _fail(e)
    console.print(_invoice_table(invoices))


@app.command()
def show(
    invoice_id: str = typer.Argument(..., help="Invoice id"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Invoice file (forces in-file backend)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Print one invoice as JSON."""
    service = _build_service(file, verbose)
    try:
        invoice = service.get_invoice(invoice_id)
    except InvoiceServiceOperationError as e:
        _fail(e)
    if invoice is None:
        console.print(f"[yellow]No invoice with id {invoice_id}[/yellow]")
        raise typer.Exit(code=1)
    console.print_json(invoice.model_dump_json())


@app.command()
def count(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Invoice file (forces in-file backend)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Print the number of stored invoices."""
    service = _build_service(file, verbose)
    try:
        console.print(service.count())
    except InvoiceServiceOperationError as e:
        _fail(e)


@app.command()
def delete(
    invoice_id: str = typer.Argument(..., help="Invoice id"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Invoice file (forces in-file backend)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Delete one invoice. Fails if the id is not stored."""
    service = _build_service(file, verbose)
    try:
        service.delete_invoice(invoice_id)
    except InvoiceServiceOperationError as e:
        _fail(e)
    console.print(f"[green]Deleted invoice {invoice_id}[/green]")


@app.command()
def purge(
    yes: bool = typer.Option(False, "--yes", help="Confirm removal of every invoice"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Invoice file (forces in-file backend)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Delete every invoice."""
    if not yes:
        console.print("[yellow]Refusing to purge without --yes[/yellow]")
        raise typer.Exit(code=1)
    service = _build_service(file, verbose)
    try:
        service.delete_all_invoices()
    except InvoiceServiceOperationError as e:
        _fail(e)
    console.print("[green]All invoices deleted[/green]")


@app.command()
def seed(
    n: int = typer.Argument(10, min=1, help="Number of random invoices to add"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Invoice file (forces in-file backend)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Add ``n`` random invoices with store-assigned ids."""
    service = _build_service(file, verbose)
    try:
        added = [service.add_invoice(random_invoice()) for _ in range(n)]
    except InvoiceServiceOperationError as e:
        _fail(e)
    console.print(_invoice_table(added))


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default from INVOICEBOOK_API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default from INVOICEBOOK_API_PORT)"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    settings = AppSettings()
    uvicorn.run(
        "invoicebook.api.app:app",
        host=host or settings.api.host,
        port=port or settings.api.port,
    )


if __name__ == "__main__":
    app()
