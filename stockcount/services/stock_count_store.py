# stockcount/services/stock_count_store.py
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from stockcount.models.stock_count import Location, ProductCategory, StockCount


class StockCountStore:
    """
    In-memory home of the reference data and the in-progress stock counts.

    - one instance per application; injected into handlers, never a global
    - counts are keyed by id; dict insertion order is the collection order
    - ids come from a monotonic counter and are never handed out twice
    - every access goes through one re-entrant lock; multi-step updates
      wrap themselves in `transaction()`
    """

    def __init__(
        self,
        *,
        locations: Iterable[Location] = (),
        product_categories: Iterable[ProductCategory] = (),
        stock_counts: Iterable[StockCount] = (),
    ) -> None:
        self._lock = threading.RLock()
        self._locations: Tuple[Location, ...] = tuple(locations)
        self._product_categories: Tuple[ProductCategory, ...] = tuple(product_categories)
        self._stock_counts: Dict[int, StockCount] = {}
        for sc in stock_counts:
            if sc.stock_count_id in self._stock_counts:
                raise ValueError(f"duplicate stock count id: {sc.stock_count_id}")
            self._stock_counts[sc.stock_count_id] = sc
        self._next_id = max(self._stock_counts, default=0) + 1

    @contextmanager
    def transaction(self) -> Iterator["StockCountStore"]:
        with self._lock:
            yield self

    # ---------------------------
    # reference data (immutable)
    # ---------------------------

    @property
    def locations(self) -> Tuple[Location, ...]:
        return self._locations

    @property
    def product_categories(self) -> Tuple[ProductCategory, ...]:
        return self._product_categories

    def find_location(self, location_id: int) -> Optional[Location]:
        return next((loc for loc in self._locations if loc.location_id == location_id), None)

    def find_product_category(self, category_code: str) -> Optional[ProductCategory]:
        return next(
            (pc for pc in self._product_categories if pc.category_code == category_code),
            None,
        )

    # ---------------------------
    # in-progress stock counts
    # ---------------------------

    def get(self, stock_count_id: int) -> Optional[StockCount]:
        with self._lock:
            return self._stock_counts.get(stock_count_id)

    def all(self) -> List[StockCount]:
        with self._lock:
            return list(self._stock_counts.values())

    def allocate_id(self) -> int:
        with self._lock:
            sid = self._next_id
            self._next_id += 1
            return sid

    def add(self, stock_count: StockCount) -> None:
        with self._lock:
            sid = stock_count.stock_count_id
            if sid in self._stock_counts:
                raise ValueError(f"duplicate stock count id: {sid}")
            self._stock_counts[sid] = stock_count
            if sid >= self._next_id:
                self._next_id = sid + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._stock_counts)
