"""Invoice CRUD endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from invoicebook.exceptions import InvoiceServiceOperationError
from invoicebook.models import Invoice
from invoicebook.services.invoice_service import InvoiceService

log = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])


class ResponseMessage(BaseModel):
    """Body returned for every non-2xx outcome."""

    message: str


def _service(req: Request) -> InvoiceService:
    return req.app.state.invoice_service


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ResponseMessage(message=message).model_dump())


def _internal_error(message: str) -> JSONResponse:
    log.warning(message, exc_info=True)
    return _message(500, message)


@router.get("", response_model=list[Invoice])
async def get_all(
    req: Request,
    seller_name: Optional[str] = None,
    buyer_name: Optional[str] = None,
) -> list[Invoice] | JSONResponse:
    """List invoices, optionally filtered by exact seller or buyer name."""
    service = _service(req)
    try:
        if seller_name is not None:
            return service.get_all_invoices_by_seller_name(seller_name)
        if buyer_name is not None:
            return service.get_all_invoices_by_buyer_name(buyer_name)
        return service.get_all_invoices()
    except InvoiceServiceOperationError:
        return _internal_error("Internal server error while getting invoices.")


@router.get("/{invoice_id}", response_model=Invoice, responses={404: {"model": ResponseMessage}})
async def get_by_id(invoice_id: str, req: Request) -> Invoice | JSONResponse:
    try:
        invoice = _service(req).get_invoice(invoice_id)
    except InvoiceServiceOperationError:
        return _internal_error(f"Internal server error while getting invoice by id: {invoice_id}")
    if invoice is None:
        return _message(404, "Invoice not found for passed id.")
    return invoice


@router.post("", response_model=Invoice, status_code=201, responses={409: {"model": ResponseMessage}})
async def add(invoice: Invoice, req: Request) -> Invoice | JSONResponse:
    """Create an invoice. The id may be omitted and is then assigned by the store."""
    service = _service(req)
    try:
        if invoice.id is not None and service.invoice_exists(invoice.id):
            return _message(409, "Invoice already exists.")
        return service.add_invoice(invoice)
    except InvoiceServiceOperationError:
        return _internal_error("Internal server error while saving specified invoice.")


@router.put(
    "/{invoice_id}",
    response_model=Invoice,
    responses={400: {"model": ResponseMessage}, 404: {"model": ResponseMessage}},
)
async def update(invoice_id: str, invoice: Invoice, req: Request) -> Invoice | JSONResponse:
    if invoice.id is not None and invoice.id != invoice_id:
        return _message(400, "Passed data is invalid. Please verify invoice id.")
    invoice = invoice.with_id(invoice_id)
    service = _service(req)
    try:
        if not service.invoice_exists(invoice_id):
            return _message(404, "Invoice not found.")
        return service.update_invoice(invoice)
    except InvoiceServiceOperationError:
        return _internal_error("Internal server error while updating specified invoice.")


@router.delete("/{invoice_id}", response_model=Invoice, responses={404: {"model": ResponseMessage}})
async def delete(invoice_id: str, req: Request) -> Invoice | JSONResponse:
    """Delete an invoice and return what was removed."""
    service = _service(req)
    try:
        invoice = service.get_invoice(invoice_id)
        if invoice is None:
            return _message(404, "Invoice not found.")
        service.delete_invoice(invoice_id)
        return invoice
    except InvoiceServiceOperationError:
        return _internal_error("Internal server error while deleting specified invoice.")
