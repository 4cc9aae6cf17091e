from typing import List
from marketplace.models.schemas.product import Product, ProductCreate, ProductUpdate
from marketplace.utils.exceptions import NotFoundError
import logging

from marketplace.services.base import BaseService

logger = logging.getLogger(__name__)

class ProductService(BaseService[Product]):
    async def create(self, data: ProductCreate) -> Product:
        product = Product(
            id=self.id_factory(),
            name=data.name,
            description=data.description,
            price=data.price,
            owner=data.owner,
            created_at=self.clock(),
            updated_at=None,
        )

        await self._handle_store_operation(lambda: self.store.put(product.id, product))
        logger.info("Created product %s for owner %s", product.id, product.owner)
        return product

    async def list_all(self) -> List[Product]:
        return await self._handle_store_operation(self.store.values)

    async def get_by_id(self, product_id: str) -> Product:
        product = await self._handle_store_operation(lambda: self.store.get(product_id))
        if product is None:
            logger.warning("Product %s not found", product_id)
            raise NotFoundError("Product", product_id)
        return product

    async def update(self, product_id: str, data: ProductUpdate) -> Product:
        product = await self._handle_store_operation(lambda: self.store.get(product_id))
        if product is None:
            logger.warning("Cannot update missing product %s", product_id)
            raise NotFoundError("Product", product_id, action="update")

        update_data = data.changes()
        for field, value in update_data.items():
            setattr(product, field, value)
        product.updated_at = self.clock()

        await self._handle_store_operation(lambda: self.store.put(product_id, product))
        logger.info("Updated product %s fields=%s", product_id, sorted(update_data))
        return product

    async def delete(self, product_id: str) -> Product:
        product = await self._handle_store_operation(lambda: self.store.remove(product_id))
        if product is None:
            logger.warning("Cannot delete missing product %s", product_id)
            raise NotFoundError("Product", product_id, action="delete")

        logger.info("Deleted product %s", product_id)
        return product
