from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


class Product(BaseModel):
    product_id: int
    product_name: str | None = None
    category: str | None = None
    price: Decimal | None = None
    stock: int | None = None
    supplier: str | None = None
    created_date: datetime | None = None

    model_config = {"from_attributes": True}


class ProductCount(BaseModel):
    count: int


class CatalogView(BaseModel):
    """State of the catalog page after one interaction."""
    search_text: str
    page_index: int
    page_count: int
    page_size: int
    total_records: int
    status_text: str
    error: bool
    products: list[Product] | None  # None when the grid was not rebound
