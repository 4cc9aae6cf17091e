from datetime import datetime, timedelta
import itertools

import pytest
import pytz
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from marketplace.database.dependencies import (
    get_order_store,
    get_product_store,
    get_review_store,
)
from marketplace.database.store import InMemoryRecordStore
from marketplace.main import app
from marketplace.models.database_models import Base


class FakeClock:
    """Returns a strictly increasing UTC timestamp on every call."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=pytz.UTC)
        self.step = step

    def __call__(self):
        self.current = self.current + self.step
        return self.current


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter):04d}"


@pytest.fixture()
def product_store():
    return InMemoryRecordStore()


@pytest.fixture()
def order_store():
    return InMemoryRecordStore()


@pytest.fixture()
def review_store():
    return InMemoryRecordStore()


@pytest.fixture()
def client(product_store, order_store, review_store):
    app.dependency_overrides[get_product_store] = lambda: product_store
    app.dependency_overrides[get_order_store] = lambda: order_store
    app.dependency_overrides[get_review_store] = lambda: review_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
