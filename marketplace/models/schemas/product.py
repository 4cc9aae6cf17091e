from pydantic import Field
from typing import Optional
from datetime import datetime

from .base import CamelModel, RecordModel


class ProductBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str
    price: float = Field(..., ge=0)
    owner: str = Field(..., min_length=1)


class ProductCreate(ProductBase):
    pass


class Product(ProductBase, RecordModel):
    updated_at: Optional[datetime] = None


class ProductUpdate(CamelModel):
    """Patch for a stored product. Only the fields that are set get applied."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    owner: Optional[str] = Field(None, min_length=1)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)
