"""HTTP API for invoicebook."""
