"""
Core of the product notification manager.

This package contains everything below the HTTP layer:
- Domain models (Customer, Product, NotificationTemplate, Notification)
- In-memory entity store
- Template interpolation
- Notification factory
- Settings and logging setup
"""

from notify_core.models import (
    Customer,
    Product,
    NotificationTemplate,
    Notification,
)
from notify_core.errors import StoreError, DuplicateEmailError
from notify_core.store import EntityStore
from notify_core.templates import interpolate, DEFAULT_MESSAGE
from notify_core.factory import NotificationFactory

__all__ = [
    "Customer",
    "Product",
    "NotificationTemplate",
    "Notification",
    "StoreError",
    "DuplicateEmailError",
    "EntityStore",
    "interpolate",
    "DEFAULT_MESSAGE",
    "NotificationFactory",
]
