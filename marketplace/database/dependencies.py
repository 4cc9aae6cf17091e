from fastapi import Depends
from sqlalchemy.orm import Session

from marketplace.database.database import get_db
from marketplace.database.store import RecordStore, SqlRecordStore
from marketplace.models import database_models
from marketplace.models.schemas.order import Order
from marketplace.models.schemas.product import Product
from marketplace.models.schemas.review import Review


def get_product_store(db: Session = Depends(get_db)) -> RecordStore[Product]:
    return SqlRecordStore(db, database_models.Product, Product)


def get_order_store(db: Session = Depends(get_db)) -> RecordStore[Order]:
    return SqlRecordStore(db, database_models.Order, Order)


def get_review_store(db: Session = Depends(get_db)) -> RecordStore[Review]:
    return SqlRecordStore(db, database_models.Review, Review)
