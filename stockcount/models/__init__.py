# stockcount/models/__init__.py
from stockcount.models.stock_count import (
    Location,
    ProductCategory,
    ProductIdentifier,
    RfidEvent,
    RfidEventLog,
    StockCount,
)

__all__ = [
    "Location",
    "ProductCategory",
    "ProductIdentifier",
    "RfidEvent",
    "RfidEventLog",
    "StockCount",
]
