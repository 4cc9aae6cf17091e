from typing import List
from marketplace.models.schemas.order import Order, OrderCreate
import logging

from .base import BaseService

logger = logging.getLogger(__name__)

class OrderService(BaseService[Order]):
    async def create(self, data: OrderCreate) -> Order:
        # product_id is a soft reference; it is stored without an existence check
        order = Order(
            id=self.id_factory(),
            product_id=data.product_id,
            buyer=data.buyer,
            quantity=data.quantity,
            created_at=self.clock(),
        )

        await self._handle_store_operation(lambda: self.store.put(order.id, order))
        logger.info(f"Placed order {order.id} for product {order.product_id} x{order.quantity}")
        return order

    async def list_all(self) -> List[Order]:
        return await self._handle_store_operation(self.store.values)
