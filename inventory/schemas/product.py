from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class ProductGroupRead(BaseModel):
    id: int
    name: str
    currency: str
    max_discount_percentage: Decimal | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductSummary(BaseModel):
    id: int
    sku: str
    name: str
    unit: str | None = None
    units_per_box: Decimal | None = None
    sell_price: Decimal | None = None
    group_id: int | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductRead(ProductSummary):
    """Product with its group loaded alongside."""

    group: ProductGroupRead | None = None


class ProductGroupDetail(ProductGroupRead):
    products: list[ProductSummary]
