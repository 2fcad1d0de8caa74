"""Pick a repository implementation by configured kind."""
from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from customers_api.repositories.base import CustomerRepository
from customers_api.repositories.customer_repo import SqlCustomerRepository
from customers_api.repositories.orm_repo import OrmCustomerRepository

REPOSITORY_KINDS = {
    OrmCustomerRepository.kind: OrmCustomerRepository,
    SqlCustomerRepository.kind: SqlCustomerRepository,
}


def build_repository(kind: str, session_factory: sessionmaker[Session]) -> CustomerRepository:
    try:
        repository_cls = REPOSITORY_KINDS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown data access kind {kind!r}; expected one of {sorted(REPOSITORY_KINDS)}"
        ) from None
    return repository_cls(session_factory)


def alternate_kind(kind: str) -> str:
    """The other repository kind (``orm`` <-> ``sql``)."""
    others = [k for k in REPOSITORY_KINDS if k != kind]
    if kind not in REPOSITORY_KINDS or len(others) != 1:
        raise ValueError(f"Unknown data access kind {kind!r}")
    return others[0]
