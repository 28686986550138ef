"""Display models for order history pages and their mapping from orders."""
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional
from pydantic import BaseModel

from app.services.ordering.models import Address, Order, OrderItem

# Catalog picture URIs are stored against this placeholder host
CATALOG_BASE_URL_PLACEHOLDER = "http://catalogbaseurltobereplaced"

DEFAULT_ORDER_STATUS = "Pending"


class OrderItemViewModel(BaseModel):
    """Order line as shown to the customer."""

    product_id: int
    product_name: str
    unit_price: Decimal
    discount: Decimal = Decimal("0")
    units: int
    picture_url: Optional[str] = None


class OrderViewModel(BaseModel):
    """Order as shown to the customer."""

    order_number: int
    order_date: datetime
    total: Decimal
    status: str
    shipping_address: Address
    order_items: List[OrderItemViewModel] = []


def order_status(order: Order) -> str:
    """Status label for an order.

    Orders carry no stored state yet, so every order reads as pending.
    """
    return DEFAULT_ORDER_STATUS


class OrderViewModelMapper:
    """Maps order aggregates to view models."""

    def __init__(self, catalog_base_url: str):
        self.catalog_base_url = catalog_base_url.rstrip("/")

    def compose_picture_uri(self, uri_template: Optional[str]) -> Optional[str]:
        if uri_template is None:
            return None
        return uri_template.replace(CATALOG_BASE_URL_PLACEHOLDER, self.catalog_base_url)

    def to_item_view_model(self, item: OrderItem) -> OrderItemViewModel:
        return OrderItemViewModel(
            product_id=item.item_ordered.catalog_item_id,
            product_name=item.item_ordered.product_name,
            unit_price=item.unit_price,
            units=item.units,
            picture_url=self.compose_picture_uri(item.item_ordered.picture_uri),
        )

    def to_view_model(self, order: Order) -> OrderViewModel:
        return OrderViewModel(
            order_number=order.id,
            order_date=order.order_date,
            total=order.total(),
            status=order_status(order),
            shipping_address=order.ship_to_address,
            order_items=[self.to_item_view_model(item) for item in order.order_items],
        )

    def to_view_models(self, orders: Iterable[Order]) -> List[OrderViewModel]:
        return [self.to_view_model(order) for order in orders]
