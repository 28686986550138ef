"""Order history queries for the signed-in customer."""
import logging
from typing import List, Union
from pydantic import BaseModel

from app.core.logging import mask_user_name
from app.services.ordering.specifications import CustomerOrdersWithItemsSpecification
from app.services.ordering.view_models import OrderViewModel, OrderViewModelMapper
from app.services.persistence.base import OrderRepository

logger = logging.getLogger(__name__)

NO_SUCH_ORDER_MESSAGE = "No such order found for this user."


class ViewResult(BaseModel):
    """Successful result carrying the model to display."""

    status_code: int = 200
    model: Union[List[OrderViewModel], OrderViewModel]


class BadRequestResult(BaseModel):
    """Client error result carrying a message."""

    status_code: int = 400
    value: str


class OrderQueryHandler:
    """Lists a customer's orders and shows the detail of one of them.

    The caller supplies the customer's user name. Repository errors are
    not caught here.
    """

    def __init__(self, order_repository: OrderRepository, mapper: OrderViewModelMapper):
        self.order_repository = order_repository
        self.mapper = mapper

    async def my_orders(self, user_name: str) -> ViewResult:
        """All orders of the user, one view model each."""
        specification = CustomerOrdersWithItemsSpecification(user_name)
        orders = await self.order_repository.list_orders(specification)
        logger.info(f"[MY ORDERS] Found {len(orders)} orders for user: {mask_user_name(user_name)}")
        return ViewResult(model=self.mapper.to_view_models(orders))

    async def detail(self, user_name: str, order_id: int) -> Union[ViewResult, BadRequestResult]:
        """Detail of one of the user's orders.

        Orders that do not exist and orders owned by someone else both
        produce the same bad request result.
        """
        specification = CustomerOrdersWithItemsSpecification(user_name)
        orders = await self.order_repository.list_orders(specification)
        order = next(
            (
                o for o in orders
                if o.id == order_id and specification.is_satisfied_by(o)
            ),
            None,
        )
        if order is None:
            logger.warning(f"[ORDER DETAIL] Order {order_id} not found for user: {mask_user_name(user_name)}")
            return BadRequestResult(value=NO_SUCH_ORDER_MESSAGE)

        logger.info(f"[ORDER DETAIL] Returning order {order_id} for user: {mask_user_name(user_name)}")
        return ViewResult(model=self.mapper.to_view_model(order))
