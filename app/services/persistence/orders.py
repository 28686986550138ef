"""Order persistence service."""
import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Order as OrderRow, OrderItem as OrderItemRow
from app.services.ordering.models import Address, CatalogItemOrdered, Order, OrderItem
from app.services.ordering.specifications import CustomerOrdersWithItemsSpecification
from app.services.persistence.base import OrderRepository

logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """Order repository backed by the application database."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_orders(
        self, specification: CustomerOrdersWithItemsSpecification
    ) -> List[Order]:
        """Run the specification's query and map rows to orders."""
        result = await self.db.execute(specification.to_select())
        rows = result.scalars().all()
        logger.debug(f"[ORDER REPOSITORY] {specification!r} matched {len(rows)} orders")
        return [self._to_domain(row) for row in rows]

    async def add(self, order: Order) -> Order:
        """Insert an order with its items."""
        address = order.ship_to_address
        row = OrderRow(
            buyer_id=order.buyer_id,
            order_date=order.order_date,
            ship_to_street=address.street,
            ship_to_city=address.city,
            ship_to_state=address.state,
            ship_to_country=address.country,
            ship_to_zip_code=address.zip_code,
            items=[
                OrderItemRow(
                    catalog_item_id=item.item_ordered.catalog_item_id,
                    product_name=item.item_ordered.product_name,
                    picture_uri=item.item_ordered.picture_uri,
                    unit_price=item.unit_price,
                    units=item.units,
                )
                for item in order.order_items
            ],
        )
        self.db.add(row)
        await self.db.commit()
        return order.model_copy(update={"id": row.id})

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        return Order(
            id=row.id,
            buyer_id=row.buyer_id,
            order_date=row.order_date,
            ship_to_address=Address(
                street=row.ship_to_street,
                city=row.ship_to_city,
                state=row.ship_to_state,
                country=row.ship_to_country,
                zip_code=row.ship_to_zip_code,
            ),
            order_items=[
                OrderItem(
                    item_ordered=CatalogItemOrdered(
                        catalog_item_id=item.catalog_item_id,
                        product_name=item.product_name,
                        picture_uri=item.picture_uri,
                    ),
                    unit_price=item.unit_price,
                    units=item.units,
                )
                for item in row.items
            ],
        )
