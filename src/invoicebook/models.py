"""Pydantic data models for invoicebook.

The storage layer treats ``Invoice`` as an opaque record keyed by ``id``;
only ``seller.name`` and ``buyer.name`` are inspected for filtered reads.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

_CENT = Decimal("0.01")


class UnitType(str, Enum):
    """Unit of measure for an invoice line item."""

    PIECE = "PIECE"
    HOUR = "HOUR"
    KILOGRAM = "KILOGRAM"
    LITER = "LITER"
    METER = "METER"
    SERVICE = "SERVICE"


class Vat(str, Enum):
    """Tax rate applied to an invoice line item."""

    VAT_0 = "VAT_0"
    VAT_5 = "VAT_5"
    VAT_8 = "VAT_8"
    VAT_23 = "VAT_23"

    @property
    def rate(self) -> Decimal:
        return Decimal(self.value.split("_")[1]) / Decimal(100)


# ── Parties ──────────────────────────────────────────────────────────


class AccountNumber(BaseModel):
    """Bank account of a company."""

    iban_number: str
    local_number: str


class Address(BaseModel):
    """Postal address."""

    street: str
    number: str
    postal_code: str
    city: str


class ContactDetails(BaseModel):
    """How to reach a company."""

    email: str
    phone_number: str
    website: str = ""
    address: Address


class Company(BaseModel):
    """A party on an invoice (seller or buyer)."""

    name: str
    tax_id: str
    account_number: AccountNumber
    contact_details: ContactDetails


# ── Invoice ──────────────────────────────────────────────────────────


class InvoiceEntry(BaseModel):
    """A single line item. Net and gross values are stored as given."""

    item: str
    quantity: int = Field(gt=0)
    unit: UnitType
    price: Decimal
    vat_rate: Vat
    net_value: Decimal
    gross_value: Decimal

    @classmethod
    def from_price(
        cls,
        item: str,
        quantity: int,
        unit: UnitType,
        price: Decimal,
        vat_rate: Vat,
    ) -> InvoiceEntry:
        """Build an entry, deriving net/gross values from price and quantity."""
        net = (price * quantity).quantize(_CENT, rounding=ROUND_HALF_UP)
        gross = (net * (1 + vat_rate.rate)).quantize(_CENT, rounding=ROUND_HALF_UP)
        return cls(
            item=item,
            quantity=quantity,
            unit=unit,
            price=price,
            vat_rate=vat_rate,
            net_value=net,
            gross_value=gross,
        )


class Invoice(BaseModel):
    """A stored invoice. ``id`` is ``None`` until the store assigns one."""

    id: Optional[str] = None
    number: str
    issued_date: date
    due_date: date
    seller: Company
    buyer: Company
    entries: list[InvoiceEntry] = Field(default_factory=list)

    def with_id(self, invoice_id: str) -> Invoice:
        return self.model_copy(update={"id": invoice_id})
