"""Domain objects handed between the router, service and repositories."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Address:
    line1: str
    city: str
    post_code: str
    country: str
    line2: Optional[str] = None
    line3: Optional[str] = None
    line4: Optional[str] = None


@dataclass
class Customer:
    first_name: str
    last_name: str
    billing_address: Address
    shipping_address: Address
    # Assigned by the store on insert
    id: Optional[int] = None
