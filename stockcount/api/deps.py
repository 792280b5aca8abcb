# stockcount/api/deps.py
from __future__ import annotations

from fastapi import Depends, Request

from stockcount.services.stock_count_service import StockCountService
from stockcount.services.stock_count_store import StockCountStore


def get_store(request: Request) -> StockCountStore:
    """The store built at app creation (app.state.store)."""
    return request.app.state.store


def get_stock_count_service(
    store: StockCountStore = Depends(get_store),
) -> StockCountService:
    return StockCountService(store)
