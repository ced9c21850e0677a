from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Build the engine for ``database_url``.

    SQLite connections are shared across the worker threads FastAPI runs
    sync endpoints on, and an in-memory database must live on a single
    connection or every session would see an empty schema.
    """
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_tables(engine: Engine) -> None:
    # Registers every table on SQLModel.metadata
    import billbook.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit the writes made inside the block, or roll all of them back.

    Any exception raised in the block rolls the session back and is
    re-raised unchanged.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
