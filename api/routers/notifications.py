"""
Notification endpoints.

Notifications are append-only: there is no update endpoint. Creating
notifications validates every referenced id first, so a request either
produces one notification per customer or is rejected as a whole.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from api.dependencies import get_factory, get_store
from notify_core.factory import NotificationFactory
from notify_core.models import Notification, NotificationCreate
from notify_core.store import EntityStore

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[Notification])
def list_notifications(
    from_: Optional[datetime] = Query(default=None, alias="from", description="ISO 8601 lower bound"),
    to: Optional[datetime] = Query(default=None, description="ISO 8601 upper bound"),
    store: EntityStore = Depends(get_store),
):
    """
    Get notifications, newest first.

    With ?from= and/or ?to= only notifications created inside the inclusive
    range are returned. Malformed dates are rejected with 400.
    """
    if from_ is None and to is None:
        return store.get_notifications()
    return store.get_notifications_by_date_range(from_, to)


@router.get("/{notification_id}", response_model=Notification)
def get_notification(notification_id: int, store: EntityStore = Depends(get_store)):
    """Get a notification by ID."""
    notification = store.get_notification(notification_id)
    if not notification:
        raise HTTPException(status_code=404, detail="Notification not found")
    return notification


@router.post("", response_model=list[Notification], status_code=status.HTTP_201_CREATED)
def create_notifications(
    payload: NotificationCreate,
    store: EntityStore = Depends(get_store),
    factory: NotificationFactory = Depends(get_factory),
):
    """
    Create one notification per customer.

    The request is rejected with 400 if any product, customer or template
    id is unknown.
    """
    for product_id in payload.product_ids:
        if not store.get_product(product_id):
            raise HTTPException(status_code=400, detail=f"Product with ID {product_id} not found")

    for customer_id in payload.customer_ids:
        if not store.get_customer(customer_id):
            raise HTTPException(status_code=400, detail=f"Customer with ID {customer_id} not found")

    if payload.template_id is not None and not store.get_template(payload.template_id):
        raise HTTPException(status_code=400, detail=f"Template with ID {payload.template_id} not found")

    return factory.create_notifications(
        product_ids=payload.product_ids,
        customer_ids=payload.customer_ids,
        template_id=payload.template_id,
    )


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_notification(notification_id: int, store: EntityStore = Depends(get_store)):
    """Delete a notification."""
    if not store.delete_notification(notification_id):
        raise HTTPException(status_code=404, detail="Notification not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
