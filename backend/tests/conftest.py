"""
Pytest configuration and fixtures for the pet clinic tests.

Every test gets its own in-memory SQLite database loaded with the
reference dataset. The ``client`` fixture points the app's ``get_db`` and
``get_settings`` dependencies at that database and a test settings object.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from petclinic.api.routes.deps import get_db, get_settings
from petclinic.core.config import Settings
from petclinic.db.init_db import init_db
from petclinic.db.models import Owner, Pet
from petclinic.main import app


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(database_url="sqlite://", seed_on_startup=False)


@pytest.fixture
def client(session_factory: sessionmaker, test_settings: Settings) -> Generator[TestClient, None, None]:
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    # Not entered as a context manager: the startup hook would touch the real database.
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()


@pytest.fixture
def franklin(db: Session) -> Owner:
    return db.execute(select(Owner).where(Owner.last_name == "Franklin")).scalar_one()


@pytest.fixture
def leo(db: Session, franklin: Owner) -> Pet:
    return db.execute(select(Pet).where(Pet.owner_id == franklin.id, Pet.name == "Leo")).scalar_one()
