"""
Shared fixtures: a fresh SQLite file per test, migrated, with both repositories
and a TestClient over create_app.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from customers_api.application import create_app
from customers_api.core.config import Settings
from customers_api.db.migrations import run_migrations
from customers_api.db.session import build_engine, build_session_factory
from customers_api.models import Address, Customer
from customers_api.repositories import OrmCustomerRepository, SqlCustomerRepository

@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'customers.db'}", log_level="DEBUG")


@pytest.fixture
def engine(settings):
    engine = build_engine(settings)
    run_migrations(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def orm_repo(session_factory):
    return OrmCustomerRepository(session_factory)


@pytest.fixture
def sql_repo(session_factory):
    return SqlCustomerRepository(session_factory)


@pytest.fixture(params=["orm", "sql"])
def repo(request, orm_repo, sql_repo):
    return {"orm": orm_repo, "sql": sql_repo}[request.param]


@pytest.fixture
def make_customer():
    def _make(first_name: str = "Ada", last_name: str = "Lovelace", **billing) -> Customer:
        billing_fields = {"line1": "1 Main St", "city": "London", "post_code": "AB1 2CD", "country": "UK"}
        billing_fields.update(billing)
        return Customer(
            first_name=first_name,
            last_name=last_name,
            billing_address=Address(**billing_fields),
            shipping_address=Address(line1="2 Side St", city="London", post_code="AB1 2CD", country="UK"),
        )

    return _make


@pytest.fixture
def make_client(settings):
    """Build a started TestClient; keyword overrides are applied to the test settings."""
    clients = []

    def _make(**overrides) -> TestClient:
        app = create_app(settings.model_copy(update=overrides))
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
