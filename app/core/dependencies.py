"""FastAPI dependencies."""
from functools import lru_cache
from typing import AsyncIterator

from fastapi import Depends

from app.core.config import settings
from app.db.database import AsyncSessionLocal
from app.services.ordering.handler import OrderQueryHandler
from app.services.ordering.view_models import OrderViewModelMapper
from app.services.persistence.base import OrderRepository
from app.services.persistence.in_memory_orders import InMemoryOrderRepository
from app.services.persistence.orders import SqlAlchemyOrderRepository


@lru_cache
def get_yaml_order_repository(orders_file: str) -> InMemoryOrderRepository:
    """One YAML-backed repository per file for the life of the process."""
    return InMemoryOrderRepository(orders_file=orders_file)


async def get_order_repository() -> AsyncIterator[OrderRepository]:
    """Get order repository instance; opens a DB session only when needed."""
    if settings.orders_file:
        yield get_yaml_order_repository(settings.orders_file)
        return
    async with AsyncSessionLocal() as db:
        yield SqlAlchemyOrderRepository(db)


def get_order_query_handler(
    order_repository: OrderRepository = Depends(get_order_repository),
) -> OrderQueryHandler:
    """Get order query handler instance."""
    return OrderQueryHandler(
        order_repository=order_repository,
        mapper=OrderViewModelMapper(settings.catalog_base_url),
    )
