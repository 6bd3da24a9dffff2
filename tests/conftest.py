# tests/conftest.py

import os
import tempfile
from datetime import datetime
from decimal import Decimal
from pathlib import Path

# Point the service at a throwaway SQLite file before any app module reads settings.
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="property-service-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB_DIR / 'test.db'}"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from shared.core.database import Base, PropertySessionLocal, property_engine  # noqa: E402
from property_service.app.enum.properties_enum import PropertyStatus  # noqa: E402
from property_service.app.enum.tasks_enum import TaskStatus, TaskType  # noqa: E402
from property_service.app.main import app  # noqa: E402
from property_service.app.models import Property, Task  # noqa: E402


@pytest.fixture(autouse=True)
def reset_schema():
    Base.metadata.drop_all(bind=property_engine)
    Base.metadata.create_all(bind=property_engine)
    yield


@pytest.fixture()
def db():
    session = PropertySessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_property(db):
    """Insert a Property row directly; created_at can be pinned for ordering tests."""
    counter = {"n": 0}

    def _make(**overrides) -> Property:
        counter["n"] += 1
        values = {
            "name": f"Property {counter['n']}",
            "address": f"{counter['n']} Main Street, Springfield",
            "owner_name": "John Smith",
            "monthly_rent": Decimal("2500.00"),
            "status": PropertyStatus.VACANT,
        }
        values.update(overrides)
        db_property = Property(**values)
        db.add(db_property)
        db.commit()
        db.refresh(db_property)
        return db_property

    return _make


@pytest.fixture()
def make_task(db):
    def _make(property_id, **overrides) -> Task:
        values = {
            "property_id": property_id,
            "description": "Deep clean all rooms and common areas",
            "type": TaskType.CLEANING,
            "assigned_to": "Maria Garcia",
            "status": TaskStatus.PENDING,
            "due_date": datetime(2024, 12, 15),
        }
        values.update(overrides)
        db_task = Task(**values)
        db.add(db_task)
        db.commit()
        db.refresh(db_task)
        return db_task

    return _make
