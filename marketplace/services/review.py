from typing import List
from marketplace.models.schemas.review import Review, ReviewCreate
import logging

from .base import BaseService

logger = logging.getLogger(__name__)

class ReviewService(BaseService[Review]):
    async def create(self, data: ReviewCreate) -> Review:
        review = Review(
            id=self.id_factory(),
            product_id=data.product_id,
            reviewer=data.reviewer,
            rating=data.rating,
            comment=data.comment,
            created_at=self.clock(),
        )

        await self._handle_store_operation(lambda: self.store.put(review.id, review))
        logger.info(f"Added review {review.id} for product {review.product_id}")
        return review

    async def list_by_product(self, product_id: str) -> List[Review]:
        """Scan every stored review and keep the ones for product_id."""
        reviews = await self._handle_store_operation(self.store.values)
        return [review for review in reviews if review.product_id == product_id]
