"""
SQLAlchemy engine and session factory for the customers database.
Built once at startup and passed explicitly to the repositories.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from customers_api.core.config import Settings

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    """Engine for ``settings.database_url``; SQLite gets cross-thread connections."""
    url = make_url(settings.database_url)
    kwargs: dict[str, Any] = {"echo": False}
    if url.get_backend_name() == "sqlite":
        # FastAPI runs sync endpoints in a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_size"] = settings.pool_size
        kwargs["max_overflow"] = settings.max_overflow
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Context manager for a single operation-scoped DB session."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
