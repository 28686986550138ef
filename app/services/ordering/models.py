"""Order aggregate models."""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class Address(BaseModel):
    """Shipping address."""

    street: str
    city: str
    state: str
    country: str
    zip_code: str


class CatalogItemOrdered(BaseModel):
    """Snapshot of a catalog item taken when the order was placed."""

    catalog_item_id: int = Field(gt=0)
    product_name: str = Field(min_length=1)
    picture_uri: Optional[str] = None


class OrderItem(BaseModel):
    """Order line."""

    item_ordered: CatalogItemOrdered
    unit_price: Decimal
    units: int = 1


class Order(BaseModel):
    """Order placed by a buyer."""

    id: Optional[int] = None
    buyer_id: str = Field(min_length=1)
    ship_to_address: Address
    order_date: datetime = Field(default_factory=datetime.utcnow)
    order_items: List[OrderItem] = []

    def total(self) -> Decimal:
        """Sum of unit price times units over all items."""
        return sum(
            (item.unit_price * item.units for item in self.order_items),
            Decimal("0"),
        )
