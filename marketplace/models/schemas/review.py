from pydantic import Field

from .base import CamelModel, RecordModel


class ReviewBase(CamelModel):
    product_id: str = Field(..., min_length=1)
    reviewer: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    comment: str


class ReviewCreate(ReviewBase):
    pass


class Review(ReviewBase, RecordModel):
    pass
