"""
Customer <-> flat row mapping shared by both repositories.

A row is a plain mapping keyed by ``first_name``, ``last_name`` and the
``billing_address_*`` / ``shipping_address_*`` groups, plus ``id`` when read
back. ``CustomerRecord`` attributes and the SQL column aliases in queries.py
use the same keys.
"""
from __future__ import annotations

from typing import Any, Mapping

from customers_api.models.domain import Address, Customer

BILLING_PREFIX = "billing_address_"
SHIPPING_PREFIX = "shipping_address_"

ADDRESS_FIELDS = ("line1", "line2", "line3", "line4", "city", "post_code", "country")

ROW_KEYS = (
    "first_name",
    "last_name",
    *(BILLING_PREFIX + f for f in ADDRESS_FIELDS),
    *(SHIPPING_PREFIX + f for f in ADDRESS_FIELDS),
)


def address_to_row(address: Address, prefix: str) -> dict[str, Any]:
    return {prefix + field: getattr(address, field) for field in ADDRESS_FIELDS}


def address_from_row(row: Mapping[str, Any], prefix: str) -> Address:
    return Address(**{field: row[prefix + field] for field in ADDRESS_FIELDS})


def customer_to_row(customer: Customer) -> dict[str, Any]:
    """Flatten for insert; ``id`` is left to the store."""
    return {
        "first_name": customer.first_name,
        "last_name": customer.last_name,
        **address_to_row(customer.billing_address, BILLING_PREFIX),
        **address_to_row(customer.shipping_address, SHIPPING_PREFIX),
    }


def row_to_customer(row: Mapping[str, Any]) -> Customer:
    return Customer(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        billing_address=address_from_row(row, BILLING_PREFIX),
        shipping_address=address_from_row(row, SHIPPING_PREFIX),
    )
