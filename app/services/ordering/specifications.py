"""Canned order queries."""
from sqlalchemy import Select, desc, select
from sqlalchemy.orm import selectinload

from app.db.models import Order as OrderRow
from app.services.ordering.models import Order


class CustomerOrdersWithItemsSpecification:
    """All orders placed by one buyer, with their items loaded."""

    def __init__(self, buyer_id: str):
        if not buyer_id:
            raise ValueError("buyer_id must not be empty")
        self.buyer_id = buyer_id

    def is_satisfied_by(self, order: Order) -> bool:
        return order.buyer_id == self.buyer_id

    def to_select(self) -> Select:
        """Build the SQL query, newest orders first."""
        return (
            select(OrderRow)
            .where(OrderRow.buyer_id == self.buyer_id)
            .options(selectinload(OrderRow.items))
            .order_by(desc(OrderRow.order_date), desc(OrderRow.id))
        )

    def __repr__(self) -> str:
        return f"CustomerOrdersWithItemsSpecification(buyer_id={self.buyer_id!r})"
