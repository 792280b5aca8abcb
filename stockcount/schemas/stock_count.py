# stockcount/schemas/stock_count.py
from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

from stockcount.models.stock_count import ProductIdentifier


# ========= base =========
class _Base(BaseModel):
    """
    Wire names are PascalCase (StockCountId, TagIdHex, ...);
    snake_case field names are accepted on input as well.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


# ========= reference data =========
class LocationOut(_Base):
    location_id: int
    name: str


class ProductCategoryOut(_Base):
    category_id: int
    category_code: str
    category_name: str


# ========= stock count =========
class RfidEventOut(_Base):
    location_id: Optional[int] = None
    work_area: Optional[str] = None
    tag_id_hex: str


class RfidEventLogOut(_Base):
    rfid_events: List[RfidEventOut] = Field(default_factory=list)


class StockCountOut(_Base):
    stock_count_id: int
    description: str
    location: LocationOut
    product_category: ProductCategoryOut
    rfid_event_log: RfidEventLogOut


# ========= start =========
class StartStockCountIn(_Base):
    """Body form of the start request; the query string form takes precedence."""

    location_id: Optional[int] = Field(None, description="Location for this stock count")
    product_category_code: Optional[str] = Field(
        None, description="Product Category for this stock count"
    )


# ========= take =========
class ProductIdentifierIn(_Base):
    tag_id_hex: Annotated[str, Field(min_length=1, description="EPC tag id, hex encoded")]

    def to_domain(self) -> ProductIdentifier:
        return ProductIdentifier(tag_id_hex=self.tag_id_hex)


class StockTakeIn(_Base):
    location_id: Optional[int] = Field(None, description="Location the reads were taken at")
    work_area: Optional[str] = Field(None, description="Work area label of the reader")
    product_identifiers: List[ProductIdentifierIn] = Field(default_factory=list)


class ReportStockTakeIn(_Base):
    stock_take: StockTakeIn = Field(..., description="The location and tags for a stock count")
