# stockcount/api/routers/reference.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from stockcount.api.deps import get_store
from stockcount.schemas.stock_count import LocationOut, ProductCategoryOut
from stockcount.services.stock_count_store import StockCountStore

router = APIRouter(tags=["Reference Data"])


@router.get("/locations", response_model=List[LocationOut], summary="List locations")
async def list_locations(store: StockCountStore = Depends(get_store)) -> List[LocationOut]:
    return [LocationOut.model_validate(loc) for loc in store.locations]


@router.get(
    "/productcategories",
    response_model=List[ProductCategoryOut],
    summary="List product categories",
    description="Codes accepted as ProductCategoryCode when starting a stock count.",
)
async def list_product_categories(
    store: StockCountStore = Depends(get_store),
) -> List[ProductCategoryOut]:
    return [ProductCategoryOut.model_validate(pc) for pc in store.product_categories]
