import os

# Settings are read at import time; point them at SQLite before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.core.database import Base, get_db
from src.main import app
import src.models  # noqa: F401


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def invoice_payload():
    """JSON body for a valid invoice."""
    return {
        "invoice_number": "INV-001",
        "client_name": "Acme Corp",
        "client_email": "billing@acmecorp.com",
        "amount_due": 150.75,
        "issue_date": "2024-01-15",
        "due_date": "2024-02-15",
        "services_rendered": "Website redesign",
        "paid": False,
    }


@pytest.fixture
def invoice_data():
    """Field values for building InvoiceCreate directly."""
    return {
        "invoice_number": "INV-001",
        "client_name": "Acme Corp",
        "client_email": "billing@acmecorp.com",
        "amount_due": 150.75,
        "issue_date": date(2024, 1, 15),
        "due_date": date(2024, 2, 15),
        "services_rendered": "Website redesign",
    }
