import pytest
from fastapi.testclient import TestClient

from letterdesk.db import models
from letterdesk.db.database import SessionLocal, engine
from letterdesk.services import CallerContext


@pytest.fixture(autouse=True)
def _no_dev_mode(monkeypatch):
    monkeypatch.delenv("DEV_MODE", raising=False)
    yield


@pytest.fixture(autouse=True)
def _clean_tables():
    models.Base.metadata.create_all(bind=engine)
    with engine.begin() as conn:
        for table in reversed(models.Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# Backwards compatibility: some tests expect a 'db' fixture name
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def alice():
    return CallerContext(id="user-alice", email="alice@example.com")


@pytest.fixture
def bob():
    return CallerContext(id="user-bob", email="bob@example.com")


@pytest.fixture
def client():
    from letterdesk.api.main import app
    return TestClient(app)

