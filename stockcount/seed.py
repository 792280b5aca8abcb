# stockcount/seed.py
from __future__ import annotations

import logging
from typing import List, Tuple

from stockcount.models.stock_count import Location, ProductCategory, StockCount
from stockcount.services.stock_count_store import StockCountStore

logger = logging.getLogger(__name__)

LOCATIONS: Tuple[Location, ...] = (
    Location(location_id=1, name="Baldock"),
    Location(location_id=2, name="Stevenage"),
)

PRODUCT_CATEGORIES: Tuple[ProductCategory, ...] = (
    ProductCategory(category_id=0, category_code="H7", category_name="Clothing"),
    ProductCategory(category_id=1, category_code="H71", category_name="Womens"),
    ProductCategory(category_id=2, category_code="H72", category_name="Toddlers"),
    ProductCategory(category_id=3, category_code="H73", category_name="Baby"),
    ProductCategory(category_id=4, category_code="H74", category_name="Girls"),
    ProductCategory(category_id=5, category_code="H75", category_name="Boys"),
    ProductCategory(category_id=6, category_code="H76", category_name="Mens"),
    ProductCategory(category_id=7, category_code="H77", category_name="Schoolwear"),
    ProductCategory(category_id=8, category_code="H78", category_name="Footwear"),
    ProductCategory(category_id=9, category_code="H79", category_name="Underwear"),
)


def seed_stock_counts() -> List[StockCount]:
    """
    The in-progress counts a fresh process starts with.

    Descriptions are historical data and are kept as recorded
    (including "Stevanage").
    """
    baldock, stevenage = LOCATIONS
    clothing = PRODUCT_CATEGORIES[0]
    return [
        StockCount(1, "Baldock - Clothing", baldock, clothing),
        StockCount(2, "Baldock - Menswear", baldock, PRODUCT_CATEGORIES[6]),
        StockCount(3, "Stevanage - Clothing", stevenage, clothing),
        StockCount(4, "Stevanage - Boys", stevenage, PRODUCT_CATEGORIES[5]),
    ]


def load_seed(*, with_stock_counts: bool = True) -> StockCountStore:
    """Build a new store holding the reference data and, optionally, the seeded counts."""
    counts = seed_stock_counts() if with_stock_counts else []
    store = StockCountStore(
        locations=LOCATIONS,
        product_categories=PRODUCT_CATEGORIES,
        stock_counts=counts,
    )
    logger.info(
        "seeded store: locations=%d categories=%d stock_counts=%d",
        len(LOCATIONS),
        len(PRODUCT_CATEGORIES),
        len(counts),
    )
    return store
