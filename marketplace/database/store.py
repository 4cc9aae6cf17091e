"""Keyed record collections backing the catalog, the order ledger and the review board.

Every collection maps an entity id to the full entity record and exposes the
same four operations, so services never know whether they talk to a database
table or to a plain dict.
"""
from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, Type, TypeVar
import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from marketplace.models.database_models import Base
from marketplace.utils.exceptions import StoreError

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class RecordStore(ABC, Generic[T]):

    @abstractmethod
    def get(self, key: str) -> Optional[T]:
        """Return the record stored under key, or None."""

    @abstractmethod
    def put(self, key: str, record: T) -> None:
        """Insert the record, overwriting whatever was stored under key."""

    @abstractmethod
    def remove(self, key: str) -> Optional[T]:
        """Delete and return the record stored under key, or None if absent."""

    @abstractmethod
    def values(self) -> List[T]:
        """Return every stored record in key order."""


class InMemoryRecordStore(RecordStore[T]):
    """Dict-backed store. Records are copied in and out."""

    def __init__(self):
        self._records: Dict[str, T] = {}

    def get(self, key: str) -> Optional[T]:
        record = self._records.get(key)
        return record.model_copy(deep=True) if record is not None else None

    def put(self, key: str, record: T) -> None:
        self._records[key] = record.model_copy(deep=True)

    def remove(self, key: str) -> Optional[T]:
        return self._records.pop(key, None)

    def values(self) -> List[T]:
        return [self._records[key].model_copy(deep=True) for key in sorted(self._records)]


class SqlRecordStore(RecordStore[T]):
    """Store backed by one SQLAlchemy table, one row per record."""

    def __init__(self, db: Session, model: Type[Base], schema: Type[T]):
        self.db = db
        self.model = model
        self.schema = schema

    def _handle_db_operation(self, operation, write: bool = False):
        try:
            result = operation()
            if write:
                self.db.commit()
            return result
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database error on %s: %s", self.model.__tablename__, str(e))
            raise StoreError(f"{self.model.__tablename__} store operation failed") from e

    def _find(self, key: str):
        return self.db.query(self.model).filter(self.model.id == key).first()

    def get(self, key: str) -> Optional[T]:
        row = self._handle_db_operation(lambda: self._find(key))
        return self.schema.model_validate(row) if row is not None else None

    def put(self, key: str, record: T) -> None:
        data = record.model_dump()
        data["id"] = key

        def operation():
            row = self._find(key)
            if row is None:
                self.db.add(self.model(**data))
                return
            for field, value in data.items():
                setattr(row, field, value)

        self._handle_db_operation(operation, write=True)

    def remove(self, key: str) -> Optional[T]:
        def operation():
            row = self._find(key)
            if row is None:
                return None
            record = self.schema.model_validate(row)
            self.db.delete(row)
            return record

        return self._handle_db_operation(operation, write=True)

    def values(self) -> List[T]:
        rows = self._handle_db_operation(
            lambda: self.db.query(self.model).order_by(self.model.id).all()
        )
        return [self.schema.model_validate(row) for row in rows]
