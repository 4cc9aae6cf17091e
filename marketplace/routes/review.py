from fastapi import APIRouter, Depends, status
from typing import List

from marketplace.database.dependencies import get_review_store
from marketplace.database.store import RecordStore
from marketplace.services.review import ReviewService
from marketplace.models.schemas.review import (
    Review,
    ReviewCreate,
)


router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("/", response_model=Review, status_code=status.HTTP_201_CREATED)
async def create_review(
    data: ReviewCreate,
    store: RecordStore[Review] = Depends(get_review_store)
):
    """Add a review for a product."""
    service = ReviewService(store)
    return await service.create(data)


@router.get("/{product_id}", response_model=List[Review])
async def list_product_reviews(
    product_id: str,
    store: RecordStore[Review] = Depends(get_review_store)
):
    """List the reviews left on a product. Unknown products yield an empty list."""
    service = ReviewService(store)
    return await service.list_by_product(product_id)
