import threading

import pytest

from stockcount.models.stock_count import Location, ProductCategory, StockCount
from stockcount.services.stock_count_store import StockCountStore

pytestmark = pytest.mark.grp_stockcount

LOC = Location(7, "Hitchin")
CAT = ProductCategory(1, "H71", "Womens")


def _sc(sid: int) -> StockCount:
    return StockCount(sid, f"count {sid}", LOC, CAT)


def test_next_id_follows_highest_seeded_id():
    store = StockCountStore(stock_counts=[_sc(3), _sc(9), _sc(4)])
    assert store.allocate_id() == 10
    assert store.allocate_id() == 11


def test_empty_store_starts_at_one():
    store = StockCountStore()
    assert store.allocate_id() == 1


def test_all_keeps_insertion_order():
    store = StockCountStore(stock_counts=[_sc(3), _sc(1)])
    store.add(_sc(2))
    assert [sc.stock_count_id for sc in store.all()] == [3, 1, 2]


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        StockCountStore(stock_counts=[_sc(1), _sc(1)])

    store = StockCountStore(stock_counts=[_sc(1)])
    with pytest.raises(ValueError):
        store.add(_sc(1))


def test_add_with_explicit_id_moves_counter_past_it():
    store = StockCountStore()
    store.add(_sc(5))
    assert store.allocate_id() == 6


def test_lookups():
    store = StockCountStore(locations=[LOC], product_categories=[CAT])
    assert store.find_location(7) is LOC
    assert store.find_location(8) is None
    assert store.find_product_category("H71") is CAT
    assert store.find_product_category("h71") is None
    assert store.get(1) is None


def test_all_returns_a_snapshot():
    store = StockCountStore(stock_counts=[_sc(1)])
    snap = store.all()
    store.add(_sc(2))
    assert len(snap) == 1
    assert len(store) == 2


def test_allocate_id_is_unique_across_threads():
    store = StockCountStore()
    seen = []
    lock = threading.Lock()

    def worker():
        got = [store.allocate_id() for _ in range(200)]
        with lock:
            seen.extend(got)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 1600
    assert len(set(seen)) == 1600
