from fastapi import APIRouter, Depends, status
from typing import List

from marketplace.database.dependencies import get_order_store
from marketplace.database.store import RecordStore
from marketplace.services.order import OrderService
from marketplace.models.schemas.order import (
    Order,
    OrderCreate,
)


router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/", response_model=Order, status_code=status.HTTP_201_CREATED)
async def create_order(
    data: OrderCreate,
    store: RecordStore[Order] = Depends(get_order_store)
):
    """Place a new order."""
    service = OrderService(store)
    return await service.create(data)


@router.get("/", response_model=List[Order])
async def list_orders(
    store: RecordStore[Order] = Depends(get_order_store)
):
    """List all orders."""
    service = OrderService(store)
    return await service.list_all()
