"""Direct-SQL repository: Customer rows through hand-written queries in queries.py."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.orm import Session, sessionmaker

from customers_api.db.session import session_scope
from customers_api.models.domain import Customer
from customers_api.repositories.base import is_storable_id
from customers_api.repositories.mapping import customer_to_row, row_to_customer
from customers_api.repositories.queries import (
    SQL_CUSTOMER_BY_ID,
    SQL_CUSTOMER_INSERT,
    SQL_LAST_INSERT_ID,
)

logger = logging.getLogger(__name__)


class SqlCustomerRepository:
    kind = "sql"

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get(self, customer_id: int) -> Optional[Customer]:
        """
        Fetch one customer; the flat row is split back into the two addresses
        by row_to_customer.
        """
        if not is_storable_id(customer_id):
            logger.debug("Customer %s out of id range", customer_id)
            return None
        with session_scope(self._session_factory) as db:
            row = db.execute(
                text(SQL_CUSTOMER_BY_ID),
                {"customer_id": customer_id},
            ).mappings().first()
        if row is None:
            logger.debug("Customer %s not found", customer_id)
            return None
        return row_to_customer(row)

    def add(self, customer: Customer) -> int:
        """
        Insert the 16 flattened columns, then read the assigned id with a
        scalar follow-up on the same connection.
        """
        with session_scope(self._session_factory) as db:
            db.execute(text(SQL_CUSTOMER_INSERT), customer_to_row(customer))
            new_id = db.execute(text(SQL_LAST_INSERT_ID)).scalar_one()
        logger.debug("Inserted customer %s", new_id)
        return int(new_id)
