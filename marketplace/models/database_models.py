from sqlalchemy import (
    Column,
    String,
    Float,
    Integer,
    Text,
    DateTime,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator
import pytz


Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """DateTime column that always hands back timezone-aware UTC values.

    SQLite drops tzinfo on the way in, so naive values read back are
    interpreted as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(pytz.UTC)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = pytz.UTC.localize(value)
        return value


class TimestampMixin:
    """Mixin for adding the creation timestamp to models"""

    created_at = Column(UTCDateTime(), nullable=False)


class Product(TimestampMixin, Base):
    """Catalog listing offered by an owner"""

    __tablename__ = "Product"

    id = Column(String, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    owner = Column(String, nullable=False)

    updated_at = Column(UTCDateTime(), nullable=True)


class Order(TimestampMixin, Base):
    """Order placed by a buyer; product_id is not a foreign key"""

    __tablename__ = "Order"

    id = Column(String, primary_key=True)
    product_id = Column(String, nullable=False)
    buyer = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)


class Review(TimestampMixin, Base):
    """Review left on a product; product_id is not a foreign key"""

    __tablename__ = "Review"

    id = Column(String, primary_key=True)
    product_id = Column(String, nullable=False)
    reviewer = Column(String, nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False)
