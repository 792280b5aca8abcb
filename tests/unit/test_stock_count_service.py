import threading

import pytest

from stockcount.models.stock_count import ProductIdentifier
from stockcount.seed import load_seed
from stockcount.services.stock_count_errors import StockCountNotFound, UnacceptableReference
from stockcount.services.stock_count_service import StockCountService

pytestmark = pytest.mark.grp_stockcount


def _tags(*hexes):
    return [ProductIdentifier(tag_id_hex=h) for h in hexes]


# ---------- get ----------


@pytest.mark.parametrize("sid", [1, 2, 3, 4])
def test_get_seeded(svc, sid):
    assert svc.get(sid).stock_count_id == sid


@pytest.mark.parametrize("sid", [0, 5, -1, 99, None])
def test_get_unknown_raises(svc, sid):
    with pytest.raises(StockCountNotFound) as ei:
        svc.get(sid)
    assert str(ei.value) == f"No stock count found with id {sid}"
    assert ei.value.stock_count_id == sid


# ---------- find ----------


def test_find_without_filters_returns_everything_in_order(svc):
    assert [sc.stock_count_id for sc in svc.find()] == [1, 2, 3, 4]


def test_find_by_location(svc):
    assert [sc.stock_count_id for sc in svc.find(location_id=1)] == [1, 2]
    assert [sc.stock_count_id for sc in svc.find(location_id=2)] == [3, 4]


def test_find_by_category(svc):
    assert [sc.stock_count_id for sc in svc.find(category_code="H7")] == [1, 3]


def test_find_by_both_is_intersection(svc):
    assert [sc.stock_count_id for sc in svc.find(location_id=2, category_code="H7")] == [3]
    assert svc.find(location_id=1, category_code="H75") == []


def test_find_empty_category_means_no_filter(svc):
    assert len(svc.find(category_code="")) == 4


def test_find_no_match_is_empty_list(svc):
    assert svc.find(location_id=42) == []


# ---------- start ----------


def test_start_assigns_next_id_and_description(svc, store):
    sc = svc.start(location_id=1, category_code="H71")
    assert sc.stock_count_id == 5
    assert sc.description == "Baldock - Womens"
    assert sc.location.location_id == 1
    assert sc.product_category.category_code == "H71"
    assert svc.get(5) is sc
    assert len(store) == 5


def test_start_ids_keep_increasing(svc):
    ids = [svc.start(location_id=2, category_code="H78").stock_count_id for _ in range(3)]
    assert ids == [5, 6, 7]


@pytest.mark.parametrize(
    "location_id, code",
    [(99, "H71"), (1, "XX"), (99, "XX"), (1, "h71")],
)
def test_start_unknown_reference_is_rejected_without_mutation(svc, store, location_id, code):
    with pytest.raises(UnacceptableReference) as ei:
        svc.start(location_id=location_id, category_code=code)
    assert str(ei.value) == "Unacceptable location or product code"
    assert len(store) == 4
    # a rejected start does not burn an id
    assert svc.start(location_id=1, category_code="H7").stock_count_id == 5


def test_start_on_empty_store():
    svc = StockCountService(load_seed(with_stock_counts=False))
    sc = svc.start(location_id=2, category_code="H79")
    assert sc.stock_count_id == 1
    assert sc.description == "Stevenage - Underwear"


def test_concurrent_starts_get_distinct_ids(svc, store):
    results = []
    lock = threading.Lock()

    def worker():
        for _ in range(25):
            sid = svc.start(location_id=1, category_code="H72").stock_count_id
            with lock:
                results.append(sid)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == list(range(5, 205))
    assert len(store) == 204


# ---------- report take ----------


def test_report_take_appends_events_in_order_to_first_match(svc):
    target = svc.report_take(location_id=2, work_area="Front", product_identifiers=_tags("E2001", "E2002"))
    assert target.stock_count_id == 3
    events = svc.get(3).rfid_event_log.rfid_events
    assert [(e.location_id, e.work_area, e.tag_id_hex) for e in events] == [
        (2, "Front", "E2001"),
        (2, "Front", "E2002"),
    ]
    # the other count at location 2 is untouched
    assert svc.get(4).rfid_event_log.rfid_events == []


def test_report_take_accumulates(svc):
    svc.report_take(location_id=1, work_area="A", product_identifiers=_tags("01"))
    svc.report_take(location_id=1, work_area="B", product_identifiers=_tags("02", "03"))
    assert [e.tag_id_hex for e in svc.get(1).rfid_event_log.rfid_events] == ["01", "02", "03"]


def test_report_take_keeps_collection_order(svc):
    svc.report_take(location_id=1, work_area=None, product_identifiers=_tags("AA"))
    assert [sc.stock_count_id for sc in svc.find()] == [1, 2, 3, 4]


def test_report_take_without_location_uses_first_count(svc):
    target = svc.report_take(location_id=None, work_area="Back", product_identifiers=_tags("FF"))
    assert target.stock_count_id == 1
    assert target.rfid_event_log.rfid_events[0].location_id is None


def test_report_take_with_no_tags_is_accepted(svc):
    target = svc.report_take(location_id=2, work_area="Front", product_identifiers=[])
    assert target.stock_count_id == 3
    assert target.rfid_event_log.rfid_events == []


def test_report_take_unmatched_location_raises(svc, store):
    with pytest.raises(StockCountNotFound) as ei:
        svc.report_take(location_id=9, work_area="X", product_identifiers=_tags("AB"))
    assert "location 9" in str(ei.value)
    assert all(sc.rfid_event_log.rfid_events == [] for sc in store.all())


def test_report_take_on_empty_store_raises():
    svc = StockCountService(load_seed(with_stock_counts=False))
    with pytest.raises(StockCountNotFound):
        svc.report_take(location_id=None, work_area=None, product_identifiers=_tags("AB"))


def test_report_take_after_start_still_targets_first_match(svc):
    svc.start(location_id=2, category_code="H71")
    target = svc.report_take(location_id=2, work_area="W", product_identifiers=_tags("01"))
    assert target.stock_count_id == 3
