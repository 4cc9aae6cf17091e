from datetime import datetime
from typing import Callable, Generic, TypeVar
import logging
from fastapi import HTTPException

from marketplace.database.store import RecordStore
from marketplace.utils.common import new_id, now
from marketplace.utils.exceptions import StoreError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseService(Generic[T]):
    def __init__(
        self,
        store: RecordStore[T],
        clock: Callable[[], datetime] = now,
        id_factory: Callable[[], str] = new_id,
    ):
        self.store = store
        self.clock = clock
        self.id_factory = id_factory

    async def _handle_store_operation(self, operation):
        try:
            return operation()
        except StoreError as e:
            logger.error("Record store error: %s", str(e))
            raise HTTPException(status_code=500, detail="Internal server error") from e
