"""Relational store: engine, sessions and the declarative base.

Users, reset tokens and cooking progress live here. Recipes are kept in the
document store (see ``namcol.document_store``).
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from namcol.config import get_settings

settings = get_settings()


def engine_options(database_url: str) -> dict[str, Any]:
    """Keyword arguments for ``create_engine`` suited to the given backend."""
    if make_url(database_url).get_backend_name() == "sqlite":
        # Sessions are handed across threads by the test client and workers
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


engine = create_engine(settings.database_url, **engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Request-scoped session. Rolled back if the endpoint raises."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db() -> None:
    """Create every relational table that does not exist yet."""
    from namcol import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
