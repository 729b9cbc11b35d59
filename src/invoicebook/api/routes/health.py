"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from invoicebook.exceptions import InvoiceServiceOperationError

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe; 200 while the process is up."""
    return {"status": "ok"}


@router.get("/ready", response_model=None)
async def ready(req: Request) -> dict[str, str] | JSONResponse:
    """Readiness probe: the configured database must answer a count."""
    try:
        req.app.state.invoice_service.count()
    except InvoiceServiceOperationError:
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ready"}
