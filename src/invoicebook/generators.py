"""Random invoice generation for tests and demo data."""

from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from invoicebook.models import (
    AccountNumber,
    Address,
    Company,
    ContactDetails,
    Invoice,
    InvoiceEntry,
    UnitType,
    Vat,
)

_COMPANY_NAMES = [
    "Acme Corp",
    "Globex",
    "Initech",
    "Umbrella",
    "Stark Industries",
    "Wayne Enterprises",
    "Hooli",
    "Vandelay Industries",
]
_CITIES = ["Krakow", "Warsaw", "Gdansk", "Poznan", "Wroclaw"]
_ITEMS = ["Consulting", "Laptop", "Monitor", "Cloud hosting", "Support plan", "Cable", "Training"]

_rng = random.Random()


def _digits(n: int) -> str:
    return "".join(str(_rng.randint(0, 9)) for _ in range(n))


def random_company(name: Optional[str] = None) -> Company:
    company_name = name or _rng.choice(_COMPANY_NAMES)
    local = _digits(26)
    slug = company_name.lower().replace(" ", "")
    return Company(
        name=company_name,
        tax_id=f"{_digits(3)}-{_digits(3)}-{_digits(2)}-{_digits(2)}",
        account_number=AccountNumber(iban_number=f"PL{local}", local_number=local),
        contact_details=ContactDetails(
            email=f"office@{slug}.example",
            phone_number=_digits(9),
            website=f"https://{slug}.example",
            address=Address(
                street="Main Street",
                number=str(_rng.randint(1, 200)),
                postal_code=f"{_digits(2)}-{_digits(3)}",
                city=_rng.choice(_CITIES),
            ),
        ),
    )


def random_entry() -> InvoiceEntry:
    price = Decimal(_rng.randint(100, 100_000)) / Decimal(100)
    return InvoiceEntry.from_price(
        item=_rng.choice(_ITEMS),
        quantity=_rng.randint(1, 20),
        unit=_rng.choice(list(UnitType)),
        price=price,
        vat_rate=_rng.choice(list(Vat)),
    )


def random_invoice(
    invoice_id: Optional[str] = None,
    *,
    seller_name: Optional[str] = None,
    buyer_name: Optional[str] = None,
    entries: int = 3,
) -> Invoice:
    """Build a plausible invoice; every argument pins one field."""
    issued = date(2024, 1, 1) + timedelta(days=_rng.randint(0, 365))
    return Invoice(
        id=invoice_id,
        number=f"FV/{issued.year}/{_rng.randint(1, 9999):04d}",
        issued_date=issued,
        due_date=issued + timedelta(days=_rng.choice([7, 14, 30])),
        seller=random_company(seller_name),
        buyer=random_company(buyer_name),
        entries=[random_entry() for _ in range(entries)],
    )
