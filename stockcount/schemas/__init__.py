# stockcount/schemas/__init__.py
"""
Schemas package.

Kept quiet on purpose: import models from the concrete module, e.g.
    from stockcount.schemas.stock_count import StockCountOut, StockTakeIn
"""

__all__: list[str] = []
