"""
Ordered, one-way schema migrations.

Each entry in ``MIGRATIONS`` is ``(version, name, sql)``. Applied versions
are recorded in ``schema_migrations``; ``run_migrations`` executes the
pending ones in ascending order, one transaction per migration. To change
the schema, append a new entry with the next version number; never edit an
applied one.
"""
from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SQL_CREATE_MIGRATIONS_TABLE = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    version INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""

SQL_APPLIED_VERSIONS = "SELECT version FROM schema_migrations;"

SQL_RECORD_VERSION = "INSERT INTO schema_migrations (version, name) VALUES (:version, :name);"

MIGRATIONS: list[tuple[int, str, str]] = [
    (
        1,
        "create_customer_table",
        """
        CREATE TABLE "Customer" (
            "Id" INTEGER PRIMARY KEY AUTOINCREMENT,
            "FirstName" VARCHAR(50),
            "LastName" VARCHAR(50),
            "BillingAddressLine1" VARCHAR(50),
            "BillingAddressLine2" VARCHAR(50),
            "BillingAddressLine3" VARCHAR(50),
            "BillingAddressLine4" VARCHAR(50),
            "BillingAddressCity" VARCHAR(50),
            "BillingAddressPostCode" VARCHAR(50),
            "BillingAddressCountry" VARCHAR(50),
            "ShippingAddressLine1" VARCHAR(50),
            "ShippingAddressLine2" VARCHAR(50),
            "ShippingAddressLine3" VARCHAR(50),
            "ShippingAddressLine4" VARCHAR(50),
            "ShippingAddressCity" VARCHAR(50),
            "ShippingAddressPostCode" VARCHAR(50),
            "ShippingAddressCountry" VARCHAR(50)
        );
        """,
    ),
]


def applied_versions(engine: Engine) -> set[int]:
    with engine.begin() as conn:
        conn.execute(text(SQL_CREATE_MIGRATIONS_TABLE))
        return {row[0] for row in conn.execute(text(SQL_APPLIED_VERSIONS))}


def run_migrations(engine: Engine) -> list[int]:
    """Apply pending migrations; returns the versions applied by this call."""
    done = applied_versions(engine)
    applied: list[int] = []
    for version, name, sql in sorted(MIGRATIONS):
        if version in done:
            continue
        with engine.begin() as conn:
            conn.execute(text(sql))
            conn.execute(text(SQL_RECORD_VERSION), {"version": version, "name": name})
        logger.info("Applied migration %s (%s)", version, name)
        applied.append(version)
    if not applied:
        logger.debug("Schema up to date (versions %s)", sorted(done))
    return applied
