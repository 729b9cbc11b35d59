"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from invoicebook.exceptions import (
    DatabaseOperationError,
    InvoiceBookError,
    InvoiceServiceOperationError,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(InvoiceServiceOperationError)
    async def handle_service_error(request: Request, exc: InvoiceServiceOperationError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"message": str(exc), "type": "service_error"})

    @app.exception_handler(DatabaseOperationError)
    async def handle_database_error(request: Request, exc: DatabaseOperationError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"message": str(exc), "type": "database_error"})

    @app.exception_handler(InvoiceBookError)
    async def handle_generic_error(request: Request, exc: InvoiceBookError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"message": str(exc), "type": "invoicebook_error"})
