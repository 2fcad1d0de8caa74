"""Storage-access contract shared by the ORM and direct-SQL repositories."""
from __future__ import annotations

from typing import Optional, Protocol

from customers_api.models.domain import Customer


class CustomerRepository(Protocol):
    def get(self, customer_id: int) -> Optional[Customer]:
        """Customer with ``customer_id``, or None when there is no such row."""
        ...

    def add(self, customer: Customer) -> int:
        """Insert ``customer`` and return the id assigned by the store."""
        ...


# SQLite INTEGER is a signed 64-bit value; no row can have an id outside it
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


def is_storable_id(customer_id: int) -> bool:
    return MIN_ROW_ID <= customer_id <= MAX_ROW_ID
