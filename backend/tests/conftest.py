import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from db import Base, enable_sqlite_foreign_keys  # noqa: E402
from domain.models import Author, Book  # noqa: E402
from services import actions, queries  # noqa: E402
from services.auth import AuthSession  # noqa: E402


@pytest.fixture
def session_factory(monkeypatch):
    """Fresh in-memory database wired into the query and action services."""
    from repositories import models  # noqa: F401  Ensures models are registered

    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    monkeypatch.setattr(queries, "SessionLocal", factory)
    monkeypatch.setattr(actions, "SessionLocal", factory)
    yield factory
    engine.dispose()


@pytest.fixture
def auth():
    return AuthSession(user_id="u1")


@pytest.fixture
def seeded(session_factory):
    """One author (A1) with one unfinished book (B1), owned by u1."""
    with session_factory() as session:
        author = queries.authors_repo.create(session, Author(id="A1", user_id="u1", name="Frank Herbert"))
        book = queries.books_repo.create(
            session, Book(id="B1", user_id="u1", title="Dune", completed=False, author_id="A1")
        )
    return {"author": author, "book": book}
