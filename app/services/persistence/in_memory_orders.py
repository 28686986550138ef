"""In-memory order repository."""
import yaml
from pathlib import Path
from typing import List, Optional

from app.services.ordering.models import Order
from app.services.ordering.specifications import CustomerOrdersWithItemsSpecification
from app.services.persistence.base import OrderRepository


def assign_missing_ids(orders: List[Order]) -> List[Order]:
    """Give orders without an id the next free id, keeping existing ids."""
    next_id = max((o.id or 0 for o in orders), default=0) + 1
    stored = []
    for order in orders:
        if order.id is None:
            order = order.model_copy(update={"id": next_id})
            next_id += 1
        stored.append(order)
    return stored


class InMemoryOrderRepository(OrderRepository):
    """Order repository holding orders in memory, optionally seeded from YAML."""

    def __init__(
        self,
        orders_file: Optional[str] = None,
        orders: Optional[List[Order]] = None,
    ):
        """Initialize with an orders file path or a list of orders."""
        self.orders_file = Path(orders_file) if orders_file else None
        self._orders: Optional[List[Order]] = (
            assign_missing_ids(list(orders)) if orders is not None else None
        )

    async def _load_orders(self) -> List[Order]:
        """Load orders from the YAML file on first use."""
        if self._orders is None:
            if self.orders_file is None or not self.orders_file.exists():
                self._orders = []
            else:
                with open(self.orders_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                    self._orders = assign_missing_ids(
                        [Order(**order) for order in data.get("orders", [])]
                    )
        return self._orders

    async def list_orders(
        self, specification: CustomerOrdersWithItemsSpecification
    ) -> List[Order]:
        """Get orders matching the specification."""
        orders = await self._load_orders()
        return [order for order in orders if specification.is_satisfied_by(order)]

    async def add(self, order: Order) -> Order:
        """Store an order under the next free id."""
        orders = await self._load_orders()
        next_id = max((o.id or 0 for o in orders), default=0) + 1
        stored = order.model_copy(update={"id": next_id})
        orders.append(stored)
        return stored
