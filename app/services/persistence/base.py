"""Order repository interface."""
from abc import ABC, abstractmethod
from typing import List

from app.services.ordering.models import Order
from app.services.ordering.specifications import CustomerOrdersWithItemsSpecification


class OrderRepository(ABC):
    """Abstract base class for order stores."""

    @abstractmethod
    async def list_orders(
        self, specification: CustomerOrdersWithItemsSpecification
    ) -> List[Order]:
        """Get all orders matching the specification (empty list if none)."""
        pass

    @abstractmethod
    async def add(self, order: Order) -> Order:
        """Persist an order and return it with its assigned id."""
        pass
