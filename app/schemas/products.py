from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.constants.dashboard import PollingState


class Product(BaseModel):
    """Product record as returned by the store. Never mutated locally."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    price: float
    stock_quantity: int = Field(alias="stockQuantity")
    created_at: str = Field(alias="createdAt")
    sold_count: int = Field(default=0, alias="soldCount")
    sold_sum: float = Field(default=0.0, alias="soldSum")


class ProductRequest(BaseModel):
    """Body for both create and update."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    price: float = Field(ge=0.01)
    stock_quantity: int = Field(ge=0, alias="stockQuantity")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class IdResult(BaseModel):
    id: str


class ErrorResponse(BaseModel):
    timestamp: str
    status: int
    error: str
    message: str


class ProductFilters(BaseModel):
    search_name: str = ""
    min_stock_quantity: Optional[int] = None
    max_stock_quantity: Optional[int] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_sold_count: Optional[int] = None
    max_sold_count: Optional[int] = None
    min_sold_sum: Optional[float] = None
    max_sold_sum: Optional[float] = None

    def is_active(self) -> bool:
        return any(
            value not in (None, "")
            for value in self.model_dump().values()
        )


class DashboardState(BaseModel):
    products: List[Product]
    loading: bool
    error: Optional[str] = None
    is_polling: bool
    last_refresh: Optional[datetime] = None
    is_visible: bool = True
    polling_state: str = PollingState.STOPPED


class ProductRow(BaseModel):
    """Product with display fields for the list view."""

    id: str
    name: str
    price: float
    stock_quantity: int
    created_at: str
    sold_count: int
    sold_sum: float
    price_display: str
    sold_count_display: str
    sold_sum_display: str
    created_at_display: str
    stock_status: str
    stock_status_color: str


class ProductSummary(BaseModel):
    total_products: int
    total_inventory_value: float
    low_stock_products: int
    total_sold_count: int
    total_revenue: float
    total_inventory_value_display: str
    total_revenue_display: str


class ProductListResponse(BaseModel):
    rows: List[ProductRow]
    total: int
    shown: int
    filters_active: bool


class MutationResponse(BaseModel):
    success: bool
    state: DashboardState


class InteractionRequest(BaseModel):
    interacting: bool


class VisibilityRequest(BaseModel):
    visible: bool
