"""One-invoice-per-line JSON codec used by the line store."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from invoicebook.exceptions import RecordDecodeError
from invoicebook.models import Invoice

log = logging.getLogger(__name__)


class InvoiceLineSerializer:
    """Encodes an ``Invoice`` as compact single-line JSON and back."""

    def encode(self, invoice: Invoice) -> str:
        # JSON string escaping guarantees no raw newline inside the line
        return invoice.model_dump_json()

    def decode(self, line: str) -> Invoice:
        """Parse one stored line. Raises ``RecordDecodeError`` on bad input."""
        text = line.strip()
        if not text:
            raise RecordDecodeError("Empty line", raw_line=line)
        try:
            return Invoice.model_validate_json(text)
        except ValidationError as e:
            raise RecordDecodeError(f"Line is not a valid invoice: {e.error_count()} error(s)", raw_line=line) from e
        except ValueError as e:
            # undecodable bytes surface as lone surrogates from the line store
            raise RecordDecodeError("Line is not valid UTF-8", raw_line=line) from e

    def try_decode(self, line: str) -> Invoice | None:
        """Like ``decode`` but returns ``None`` for malformed lines."""
        try:
            return self.decode(line)
        except RecordDecodeError:
            log.debug("Skipping undecodable line: %.80r", line)
            return None
