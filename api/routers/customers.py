"""
Customer endpoints.

Email addresses are unique across customers; a duplicate on create or
update is rejected with 400 and the store is left unchanged.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.dependencies import get_store
from notify_core.errors import DuplicateEmailError
from notify_core.models import Customer, CustomerCreate, CustomerUpdate
from notify_core.store import EntityStore

logger = logging.getLogger("api")

router = APIRouter(prefix="/customers", tags=["Customers"])

DUPLICATE_EMAIL = "Customer with this email already exists"


@router.get("", response_model=list[Customer])
def list_customers(store: EntityStore = Depends(get_store)):
    """Get all customers."""
    return store.get_customers()


@router.get("/{customer_id}", response_model=Customer)
def get_customer(customer_id: int, store: EntityStore = Depends(get_store)):
    """Get a customer by ID."""
    customer = store.get_customer(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, store: EntityStore = Depends(get_store)):
    """Create a customer. The email must not belong to another customer."""
    try:
        return store.create_customer(payload)
    except DuplicateEmailError:
        logger.info(f"Rejected duplicate customer email {payload.email}")
        raise HTTPException(status_code=400, detail=DUPLICATE_EMAIL)


@router.put("/{customer_id}", response_model=Customer)
def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    store: EntityStore = Depends(get_store),
):
    """Partially update a customer."""
    try:
        customer = store.update_customer(customer_id, payload.changes())
    except DuplicateEmailError:
        raise HTTPException(status_code=400, detail=DUPLICATE_EMAIL)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_customer(customer_id: int, store: EntityStore = Depends(get_store)):
    """Delete a customer. Existing notifications keep their snapshot."""
    if not store.delete_customer(customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
