"""Product endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from api.dependencies import get_store
from notify_core.models import Product, ProductCreate, ProductUpdate
from notify_core.store import EntityStore

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[Product])
def list_products(
    active: Optional[str] = Query(default=None, description="Use 'true' for active products only"),
    store: EntityStore = Depends(get_store),
):
    """Get all products, or only active ones with ?active=true."""
    if active == "true":
        return store.get_active_products()
    return store.get_products()


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, store: EntityStore = Depends(get_store)):
    """Get a product by ID."""
    product = store.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, store: EntityStore = Depends(get_store)):
    """Create a product."""
    return store.create_product(payload)


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    store: EntityStore = Depends(get_store),
):
    """Partially update a product."""
    product = store.update_product(product_id, payload.changes())
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_product(product_id: int, store: EntityStore = Depends(get_store)):
    """Delete a product."""
    if not store.delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
