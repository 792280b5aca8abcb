# stockcount/services/stock_count_service.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from stockcount.models.stock_count import ProductIdentifier, RfidEvent, StockCount
from stockcount.obs.metrics import (
    stockcount_rejected_total,
    stockcount_rfid_events_total,
    stockcount_started_total,
)
from stockcount.services.stock_count_errors import StockCountNotFound, UnacceptableReference
from stockcount.services.stock_count_store import StockCountStore

logger = logging.getLogger(__name__)


class StockCountService:
    """
    Stock count operations over one StockCountStore.

    The service never touches HTTP: failures are raised as
    StockCountNotFound / UnacceptableReference and mapped by the router.
    """

    NotFound = StockCountNotFound
    NotAcceptable = UnacceptableReference

    def __init__(self, store: StockCountStore):
        self.store = store

    def get(self, stock_count_id: Optional[int]) -> StockCount:
        sc = self.store.get(stock_count_id) if stock_count_id is not None else None
        if sc is None:
            raise StockCountNotFound(
                f"No stock count found with id {stock_count_id}",
                stock_count_id=stock_count_id,
            )
        return sc

    def find(
        self,
        *,
        location_id: Optional[int] = None,
        category_code: Optional[str] = None,
    ) -> List[StockCount]:
        matching = self.store.all()
        if location_id is not None:
            matching = [sc for sc in matching if sc.location.location_id == location_id]
        if category_code:
            matching = [sc for sc in matching if sc.product_category.category_code == category_code]
        return matching

    def start(self, *, location_id: int, category_code: str) -> StockCount:
        with self.store.transaction() as store:
            location = store.find_location(location_id)
            category = store.find_product_category(category_code)
            if location is None or category is None:
                reason = "unknown_location" if location is None else "unknown_category"
                stockcount_rejected_total.labels("start", reason).inc()
                logger.warning(
                    "start rejected: location_id=%s category_code=%r (%s)",
                    location_id,
                    category_code,
                    reason,
                )
                raise UnacceptableReference(
                    "Unacceptable location or product code",
                    location_id=location_id,
                    category_code=category_code,
                )

            sc = StockCount(
                stock_count_id=store.allocate_id(),
                description=f"{location.name} - {category.category_name}",
                location=location,
                product_category=category,
            )
            store.add(sc)

        stockcount_started_total.labels(str(location.location_id), category.category_code).inc()
        logger.info(
            "stock count started: id=%d location_id=%d category_code=%s",
            sc.stock_count_id,
            location.location_id,
            category.category_code,
        )
        return sc

    def report_take(
        self,
        *,
        location_id: Optional[int],
        work_area: Optional[str],
        product_identifiers: Sequence[ProductIdentifier],
    ) -> StockCount:
        """
        Record one RFID event per tag read against the first in-progress
        count at `location_id` (any count when no location is given).

        Only the first match receives the reads; later matches are ignored.
        """
        with self.store.transaction() as store:
            candidates = store.all()
            if location_id is not None:
                candidates = [sc for sc in candidates if sc.location.location_id == location_id]
            target = candidates[0] if candidates else None

            if target is None:
                stockcount_rejected_total.labels("take", "no_match").inc()
                logger.warning("stock take unmatched: location_id=%s", location_id)
                if location_id is None:
                    msg = "No in-progress stock count found"
                else:
                    msg = f"No in-progress stock count found for location {location_id}"
                raise StockCountNotFound(msg, location_id=location_id)

            for pid in product_identifiers:
                target.record(
                    RfidEvent(
                        location_id=location_id,
                        work_area=work_area,
                        tag_id_hex=pid.tag_id_hex,
                    )
                )

        n = len(product_identifiers)
        stockcount_rfid_events_total.labels(str(target.location.location_id)).inc(n)
        logger.info(
            "stock take recorded: id=%d location_id=%s work_area=%r tags=%d",
            target.stock_count_id,
            location_id,
            work_area,
            n,
        )
        return target
