"""SQLAlchemy record and domain objects only; no business logic."""
from customers_api.models.customer import CustomerRecord
from customers_api.models.domain import Address, Customer

__all__ = [
    "Address",
    "Customer",
    "CustomerRecord",
]
