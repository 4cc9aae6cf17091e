from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire; either is accepted as input."""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class RecordModel(CamelModel):
    id: str
    created_at: datetime
