from pydantic import Field

from .base import CamelModel, RecordModel


class OrderBase(CamelModel):
    product_id: str = Field(..., min_length=1)
    buyer: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)


class OrderCreate(OrderBase):
    pass


class Order(OrderBase, RecordModel):
    pass
