# tests/conftest.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from stockcount.core.config import AppSettings
from stockcount.main import create_app
from stockcount.seed import load_seed
from stockcount.services.stock_count_service import StockCountService
from stockcount.services.stock_count_store import StockCountStore


@pytest.fixture
def settings() -> AppSettings:
    # explicit values, independent of the developer's env / .env
    return AppSettings(ENV="test", DEBUG=False, SEED_ON_STARTUP=True, METRICS_ENABLED=True)


@pytest.fixture
def store() -> StockCountStore:
    """Fresh seeded store per test: no state leaks between tests."""
    return load_seed()


@pytest.fixture
def svc(store: StockCountStore) -> StockCountService:
    return StockCountService(store)


@pytest.fixture
def app(settings: AppSettings, store: StockCountStore):
    return create_app(settings, store=store)


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as c:
        yield c
