# stockcount/api/routers/stock_count.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from stockcount.api.deps import get_stock_count_service
from stockcount.api.problem import ProblemDetail, raise_404, raise_406, raise_422
from stockcount.schemas.stock_count import (
    ReportStockTakeIn,
    StartStockCountIn,
    StockCountOut,
)
from stockcount.services.stock_count_service import StockCountService

router = APIRouter(prefix="/stockcount", tags=["Stock Count Service"])


def _optional_int(name: str, raw: Optional[str]) -> Optional[int]:
    # "?LocationId=" is the same as leaving the filter out
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise_422(
            "Invalid request parameters",
            details=[{"type": "validation", "path": name, "reason": "Input should be a valid integer"}],
        )


@router.get(
    "/{stock_count_id}",
    response_model=StockCountOut,
    summary="Get a stock count by ID",
)
async def get_stock_count(
    stock_count_id: int,
    svc: StockCountService = Depends(get_stock_count_service),
) -> StockCountOut:
    try:
        sc = svc.get(stock_count_id)
    except StockCountService.NotFound as e:
        raise_404(str(e), context={"stock_count_id": stock_count_id})
    return StockCountOut.model_validate(sc)


@router.get(
    "",
    response_model=List[StockCountOut],
    summary="Find matching stock counts",
    description="Will find stock counts that match the criteria",
)
async def find_stock_counts(
    location_id: Optional[str] = Query(
        None,
        alias="LocationId",
        description="A location id for getting stock counts (integer; empty means any)",
    ),
    category_code: Optional[str] = Query(
        None, alias="CategoryCode", description="A category code for getting stock counts"
    ),
    svc: StockCountService = Depends(get_stock_count_service),
) -> List[StockCountOut]:
    rows = svc.find(
        location_id=_optional_int("LocationId", location_id),
        category_code=category_code,
    )
    return [StockCountOut.model_validate(sc) for sc in rows]


@router.post(
    "/start",
    response_model=int,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Start a stock count with specified data",
    description="Returns the id of the new stock count.",
)
async def start_stock_count(
    location_id: Optional[int] = Query(
        None, alias="LocationId", description="Location for this stock count"
    ),
    product_category_code: Optional[str] = Query(
        None, alias="ProductCategoryCode", description="Product Category for this stock count"
    ),
    payload: Optional[StartStockCountIn] = Body(None),
    svc: StockCountService = Depends(get_stock_count_service),
) -> int:
    # query string wins over body, field by field
    if payload is not None:
        if location_id is None:
            location_id = payload.location_id
        if not product_category_code:
            product_category_code = payload.product_category_code

    missing: List[ProblemDetail] = []
    if location_id is None:
        missing.append({"type": "validation", "path": "LocationId", "reason": "Field required"})
    if not product_category_code:
        missing.append(
            {"type": "validation", "path": "ProductCategoryCode", "reason": "Field required"}
        )
    if missing:
        raise_422("Invalid request parameters", details=missing)

    try:
        sc = svc.start(location_id=location_id, category_code=product_category_code)
    except StockCountService.NotAcceptable as e:
        raise_406(
            str(e),
            context={
                "location_id": e.location_id,
                "category_code": e.category_code,
            },
        )
    return sc.stock_count_id


@router.post(
    "/take",
    response_model=int,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Report the RFID tag reads for the stock count",
    description=(
        "Send RFID reads for stock counting. Reads are recorded against the first "
        "in-progress stock count at the given location. Always answers 0."
    ),
)
async def report_stock_take(
    payload: ReportStockTakeIn,
    svc: StockCountService = Depends(get_stock_count_service),
) -> int:
    take = payload.stock_take
    try:
        svc.report_take(
            location_id=take.location_id,
            work_area=take.work_area,
            product_identifiers=[p.to_domain() for p in take.product_identifiers],
        )
    except StockCountService.NotFound as e:
        raise_404(str(e), context={"location_id": take.location_id})
    return 0
