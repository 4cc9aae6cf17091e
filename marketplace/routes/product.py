from fastapi import APIRouter, Depends, status
from typing import List
from marketplace.database.dependencies import get_product_store
from marketplace.database.store import RecordStore
from marketplace.services.product import ProductService
from marketplace.models.schemas.product import (
    Product,
    ProductCreate,
    ProductUpdate,
)

router = APIRouter(prefix="/products", tags=["products"])

@router.post("/", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    store: RecordStore[Product] = Depends(get_product_store)
):
    """Create a new product listing."""
    service = ProductService(store)
    return await service.create(data)


@router.get("/", response_model=List[Product])
async def list_products(
    store: RecordStore[Product] = Depends(get_product_store)
):
    """List all products."""
    service = ProductService(store)
    return await service.list_all()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    store: RecordStore[Product] = Depends(get_product_store)
):
    """Get a specific product by ID."""
    service = ProductService(store)
    return await service.get_by_id(product_id)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    store: RecordStore[Product] = Depends(get_product_store)
):
    """Update an existing product with the fields present in the body."""
    service = ProductService(store)
    return await service.update(product_id, data)


@router.delete("/{product_id}", response_model=Product)
async def delete_product(
    product_id: str,
    store: RecordStore[Product] = Depends(get_product_store)
):
    """Delete a product and return the removed record."""
    service = ProductService(store)
    return await service.delete(product_id)
