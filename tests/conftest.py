"""
Pytest configuration - shared fixtures
"""
import sys
import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import QueuePool, StaticPool

# Add backend directory to sys.path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../backend"))

from gdfarms.config import Settings
from gdfarms.database import Base, Store
from gdfarms.main import create_app
from gdfarms.schemas import ItemCreate
from gdfarms.services.user_service import UserService


@pytest.fixture
def store() -> Generator[Store, None, None]:
    """Store backed by an in-memory SQLite database"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    store = Store(engine)
    store.init_schema()

    try:
        yield store
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def file_store(tmp_path) -> Generator[Store, None, None]:
    """Store backed by a SQLite file, for tests that need real concurrent connections"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'gdfarms.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    store = Store(engine)
    store.init_schema()

    try:
        yield store
    finally:
        engine.dispose()


@pytest.fixture
def bounded_store(tmp_path) -> Generator[Store, None, None]:
    """Store with a single pooled connection, so any leak blocks the next checkout"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'bounded.db'}",
        connect_args={"check_same_thread": False},
        poolclass=QueuePool,
        pool_size=1,
        max_overflow=0,
        pool_timeout=1,
    )
    store = Store(engine)
    store.init_schema()

    try:
        yield store
    finally:
        engine.dispose()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        RATE_LIMIT_ENABLED=False,
        ENVIRONMENT="development",
    )


@pytest.fixture
def client(test_settings, store) -> Generator[TestClient, None, None]:
    """HTTP client for an app wired to the in-memory store"""
    app = create_app(test_settings, store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_service(test_settings) -> UserService:
    return UserService.from_settings(test_settings)


@pytest.fixture
def user_id(store, user_service) -> str:
    return user_service.init_user(store).user_id


@pytest.fixture
def other_user_id(store, user_service) -> str:
    return user_service.init_user(store).user_id


@pytest.fixture
def sample_item(user_id) -> ItemCreate:
    return ItemCreate(
        userId=user_id,
        name="Layer feed",
        category="Feed",
        unit="bag",
        quantity=2.5,
        cost=1800.0,
        price=2100.0,
        description="70kg bags from the co-op",
    )
