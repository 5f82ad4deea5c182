"""
Shared pytest fixtures — receipt stores + FastAPI TestClient.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from receiptlink.config import Settings
from receiptlink.main import create_app
from receiptlink.store import InMemoryReceiptStore, SqlReceiptStore


@pytest.fixture()
def settings():
    return Settings(_env_file=None, DATABASE_URL=None, PUBLIC_BASE_URL=None)


@pytest.fixture()
def store():
    return InMemoryReceiptStore()


@pytest.fixture()
def sql_engine():
    # StaticPool ensures all connections share the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture()
def sql_store(sql_engine):
    store = SqlReceiptStore(sql_engine)
    store.init_schema()
    return store


@pytest.fixture()
def client(store, settings):
    app = create_app(store=store, settings=settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def sql_client(sql_store, settings):
    app = create_app(store=sql_store, settings=settings)
    with TestClient(app) as c:
        yield c
