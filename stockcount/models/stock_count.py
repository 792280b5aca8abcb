# stockcount/models/stock_count.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Location:
    location_id: int
    name: str


@dataclass(frozen=True)
class ProductCategory:
    category_id: int
    category_code: str
    category_name: str


@dataclass(frozen=True)
class ProductIdentifier:
    """A single RFID read as submitted by the reader: the EPC tag in hex."""

    tag_id_hex: str


@dataclass(frozen=True)
class RfidEvent:
    location_id: Optional[int]
    work_area: Optional[str]
    tag_id_hex: str


@dataclass
class RfidEventLog:
    rfid_events: List[RfidEvent] = field(default_factory=list)


@dataclass
class StockCount:
    """
    One in-progress counting session (location x product category).

    location / product_category are value copies of the reference data taken
    at start time; the event log only ever grows.
    """

    stock_count_id: int
    description: str
    location: Location
    product_category: ProductCategory
    rfid_event_log: RfidEventLog = field(default_factory=RfidEventLog)

    def record(self, event: RfidEvent) -> None:
        self.rfid_event_log.rfid_events.append(event)
