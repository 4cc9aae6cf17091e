from typing import Optional

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """Raised when a lookup, update or delete targets an id that is not stored."""

    def __init__(self, entity: str, entity_id: str, action: Optional[str] = None):
        if action:
            detail = f"Couldn't {action} {entity.lower()} with ID={entity_id}. {entity} not found"
        else:
            detail = f"{entity} with ID={entity_id} not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class StoreError(Exception):
    """Raised by a record store when the backing database operation fails."""
