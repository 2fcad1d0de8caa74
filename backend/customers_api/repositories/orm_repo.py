"""Mapped-entity repository: Customer rows through the SQLAlchemy ORM."""
from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from customers_api.db.session import session_scope
from customers_api.models.customer import CustomerRecord
from customers_api.models.domain import Customer
from customers_api.repositories.base import is_storable_id
from customers_api.repositories.mapping import ROW_KEYS, customer_to_row, row_to_customer

logger = logging.getLogger(__name__)


def record_to_row(record: CustomerRecord) -> dict[str, Any]:
    return {key: getattr(record, key) for key in ("id", *ROW_KEYS)}


class OrmCustomerRepository:
    kind = "orm"

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get(self, customer_id: int) -> Optional[Customer]:
        if not is_storable_id(customer_id):
            logger.debug("Customer %s out of id range", customer_id)
            return None
        with session_scope(self._session_factory) as db:
            record = db.execute(
                select(CustomerRecord).where(CustomerRecord.id == customer_id)
            ).scalars().first()
            if record is None:
                logger.debug("Customer %s not found", customer_id)
                return None
            # Convert before the scope commits and expires the record
            return row_to_customer(record_to_row(record))

    def add(self, customer: Customer) -> int:
        with session_scope(self._session_factory) as db:
            record = CustomerRecord(**customer_to_row(customer))
            db.add(record)
            db.flush()
            new_id = record.id
        logger.debug("Inserted customer %s", new_id)
        return new_id
