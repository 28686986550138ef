"""Order history API endpoints."""
import logging
from typing import List
from fastapi import APIRouter, Depends, Request, HTTPException

from app.api.auth import get_current_user_name
from app.core.dependencies import get_order_query_handler
from app.core.logging import mask_user_name
from app.services.ordering.handler import BadRequestResult, OrderQueryHandler
from app.services.ordering.view_models import OrderViewModel


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/orders/my-orders", response_model=List[OrderViewModel])
async def my_orders(
    request: Request,
    user_name: str = Depends(get_current_user_name),
    handler: OrderQueryHandler = Depends(get_order_query_handler),
):
    """List the signed-in user's orders."""
    logger.info(
        f"[MY ORDERS] Request received - user: {mask_user_name(user_name)}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    result = await handler.my_orders(user_name)
    return result.model


@router.get("/api/orders/{order_id}", response_model=OrderViewModel)
async def order_detail(
    order_id: int,
    request: Request,
    user_name: str = Depends(get_current_user_name),
    handler: OrderQueryHandler = Depends(get_order_query_handler),
):
    """Show one of the signed-in user's orders."""
    logger.info(
        f"[ORDER DETAIL] Request received - order: {order_id}, user: {mask_user_name(user_name)}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    result = await handler.detail(user_name, order_id)
    if isinstance(result, BadRequestResult):
        raise HTTPException(status_code=result.status_code, detail=result.value)
    return result.model
