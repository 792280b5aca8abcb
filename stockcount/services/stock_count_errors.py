# stockcount/services/stock_count_errors.py
from __future__ import annotations

from typing import Optional


class StockCountNotFound(Exception):
    """No in-progress stock count matched the request."""

    def __init__(self, message: str, *, stock_count_id: Optional[int] = None, location_id: Optional[int] = None):
        super().__init__(message)
        self.stock_count_id = stock_count_id
        self.location_id = location_id


class UnacceptableReference(Exception):
    """Unknown location id or product category code on start."""

    def __init__(self, message: str, *, location_id: int, category_code: str):
        super().__init__(message)
        self.location_id = location_id
        self.category_code = category_code
