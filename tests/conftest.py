import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from studentdb.core.config import VARIANTS
from studentdb.db.base_class import Base
from studentdb.db.init_db import init_db, seed_db
from studentdb.db.session import make_engine
from studentdb.main import create_app
from studentdb.repositories.registry import get_repository_class

TEST_DB_FILE = "test_studentdb.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"

engine = make_engine(TEST_DB_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema with the seed rows once for the whole test session.

    Nothing in the app writes, so the seed is shared by every test.
    """
    Base.metadata.drop_all(bind=engine)
    init_db(engine)
    db = TestingSessionLocal()
    try:
        seed_db(db)
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture()
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(params=VARIANTS)
def variant(request):
    return request.param


@pytest.fixture()
def client(variant):
    """Test client for one variant, wired to the test database engine."""
    app = create_app(variant, engine=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def repo(variant, db):
    return get_repository_class(variant)(db)


@pytest.fixture()
def test_engine():
    return engine
