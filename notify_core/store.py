"""
In-memory entity store for the product notification manager.

This module provides the data access layer for the four entity kinds:
customers, products, notification templates and notifications.

Design decisions:
- Records live in per-kind dicts keyed by integer id, for the lifetime of
  the process only
- Each kind has its own monotonic id counter; ids are never reused
- Each kind has its own lock. FastAPI runs sync endpoints in a thread pool,
  so id allocation, the email uniqueness check + insert and merge updates
  must not interleave
- Stored models are frozen; updates swap in a modified copy
- Missing records are signalled with None / False, not exceptions
- No module-level instance: callers construct a store and pass it around
"""

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from notify_core.errors import DuplicateEmailError
from notify_core.models import (
    Customer,
    CustomerCreate,
    Notification,
    NotificationTemplate,
    Product,
    ProductCreate,
    TemplateCreate,
    utc_now,
)

logger = logging.getLogger("entity_store")


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC so they compare with stored timestamps."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _newest_first(records: list, attribute: str) -> list:
    return sorted(records, key=lambda r: (getattr(r, attribute), r.id), reverse=True)


class _Collection:
    """Records of one entity kind plus the id counter and lock guarding them."""

    def __init__(self):
        self.records: dict[int, object] = {}
        self.next_id = 1
        self.lock = threading.Lock()

    def allocate_id(self) -> int:
        # Caller holds self.lock
        record_id = self.next_id
        self.next_id += 1
        return record_id

    def snapshot(self) -> list:
        with self.lock:
            return list(self.records.values())

    def update(self, record_id: int, changes: dict):
        with self.lock:
            current = self.records.get(record_id)
            if current is None:
                return None
            updated = current.model_copy(update=changes)
            self.records[record_id] = updated
            return updated

    def delete(self, record_id: int) -> bool:
        with self.lock:
            return self.records.pop(record_id, None) is not None


class EntityStore:
    """
    Keyed in-memory storage with CRUD operations per entity kind.

    Example:
        store = EntityStore()
        alice = store.create_customer(CustomerCreate(
            name="Alice", email="alice@example.com", phone_number="+1-555-0100",
        ))
        store.get_customer(alice.id)
    """

    def __init__(self):
        self._customers = _Collection()
        self._products = _Collection()
        self._templates = _Collection()
        self._notifications = _Collection()

    # =========================================================================
    # Customer Operations
    # =========================================================================

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Get a customer by ID."""
        return self._customers.records.get(customer_id)

    def get_customer_by_email(self, email: str) -> Optional[Customer]:
        """Get a customer by email address (exact match)."""
        for customer in self._customers.snapshot():
            if customer.email == email:
                return customer
        return None

    def get_customers(self) -> list[Customer]:
        """Get all customers in insertion order."""
        return self._customers.snapshot()

    def create_customer(self, data: CustomerCreate) -> Customer:
        """
        Create a customer.

        Raises:
            DuplicateEmailError: If another customer already uses the email.
        """
        collection = self._customers
        with collection.lock:
            if any(c.email == data.email for c in collection.records.values()):
                raise DuplicateEmailError(data.email)
            customer = Customer(id=collection.allocate_id(), **data.model_dump())
            collection.records[customer.id] = customer
        logger.info(f"Created customer {customer.id} <{customer.email}>")
        return customer

    def update_customer(self, customer_id: int, changes: dict) -> Optional[Customer]:
        """
        Merge changes onto a customer.

        Returns the updated customer or None if not found.

        Raises:
            DuplicateEmailError: If the new email belongs to another customer.
        """
        collection = self._customers
        with collection.lock:
            current = collection.records.get(customer_id)
            if current is None:
                return None
            email = changes.get("email")
            if email is not None and any(
                c.email == email and c.id != customer_id
                for c in collection.records.values()
            ):
                raise DuplicateEmailError(email)
            updated = current.model_copy(update=changes)
            collection.records[customer_id] = updated
        logger.info(f"Updated customer {customer_id}: {sorted(changes)}")
        return updated

    def delete_customer(self, customer_id: int) -> bool:
        """Delete a customer. Returns whether a record existed."""
        return self._delete(self._customers, "customer", customer_id)

    # =========================================================================
    # Product Operations
    # =========================================================================

    def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID."""
        return self._products.records.get(product_id)

    def get_products(self) -> list[Product]:
        """Get all products in insertion order."""
        return self._products.snapshot()

    def get_active_products(self) -> list[Product]:
        """Get products whose active flag is set."""
        return [p for p in self._products.snapshot() if p.is_active]

    def create_product(self, data: ProductCreate) -> Product:
        """Create a product. Products are active unless stated otherwise."""
        collection = self._products
        with collection.lock:
            product = Product(id=collection.allocate_id(), **data.model_dump())
            collection.records[product.id] = product
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def update_product(self, product_id: int, changes: dict) -> Optional[Product]:
        """Merge changes onto a product. Returns None if not found."""
        updated = self._products.update(product_id, changes)
        if updated is not None:
            logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return updated

    def delete_product(self, product_id: int) -> bool:
        """
        Delete a product.

        Notifications that reference the product keep its id; there is no
        referential integrity between the two.
        """
        return self._delete(self._products, "product", product_id)

    # =========================================================================
    # Notification Template Operations
    # =========================================================================

    def get_template(self, template_id: int) -> Optional[NotificationTemplate]:
        """Get a notification template by ID."""
        return self._templates.records.get(template_id)

    def get_templates(self) -> list[NotificationTemplate]:
        """Get all templates, newest first."""
        return _newest_first(self._templates.snapshot(), "created_at")

    def create_template(
        self,
        data: TemplateCreate,
        created_at: Optional[datetime] = None,
    ) -> NotificationTemplate:
        """Create a template. created_at defaults to now and never changes."""
        collection = self._templates
        with collection.lock:
            template = NotificationTemplate(
                id=collection.allocate_id(),
                created_at=created_at or utc_now(),
                **data.model_dump(),
            )
            collection.records[template.id] = template
        logger.info(f"Created template {template.id} ({template.name})")
        return template

    def update_template(self, template_id: int, changes: dict) -> Optional[NotificationTemplate]:
        """Merge changes onto a template. Returns None if not found."""
        changes = {k: v for k, v in changes.items() if k not in ("id", "created_at")}
        updated = self._templates.update(template_id, changes)
        if updated is not None:
            logger.info(f"Updated template {template_id}: {sorted(changes)}")
        return updated

    def delete_template(self, template_id: int) -> bool:
        """Delete a template. Returns whether a record existed."""
        return self._delete(self._templates, "template", template_id)

    # =========================================================================
    # Notification Operations
    # =========================================================================

    def get_notification(self, notification_id: int) -> Optional[Notification]:
        """Get a notification by ID."""
        return self._notifications.records.get(notification_id)

    def get_notifications(self) -> list[Notification]:
        """Get all notifications, newest first."""
        return _newest_first(self._notifications.snapshot(), "timestamp")

    def get_notifications_by_date_range(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Notification]:
        """
        Get notifications created within [start, end], newest first.

        Either bound may be None for an open-ended range. Naive datetimes
        are treated as UTC.
        """
        start = as_utc(start) if start is not None else None
        end = as_utc(end) if end is not None else None
        return [
            n for n in self.get_notifications()
            if (start is None or n.timestamp >= start)
            and (end is None or n.timestamp <= end)
        ]

    def create_notification(
        self,
        customer: Customer,
        notification_body: str,
        product_ids: list[int],
        template_id: Optional[int] = None,
        timestamp: Optional[datetime] = None,
    ) -> Notification:
        """
        Store a notification addressed to a customer.

        The customer's contact fields are copied onto the notification.
        """
        collection = self._notifications
        with collection.lock:
            notification = Notification(
                id=collection.allocate_id(),
                customer_id=customer.id,
                customer_email=customer.email,
                customer_name=customer.name,
                customer_phone=customer.phone_number,
                notification_body=notification_body,
                template_id=template_id,
                product_ids=list(product_ids),
                timestamp=as_utc(timestamp) if timestamp is not None else utc_now(),
            )
            collection.records[notification.id] = notification
        logger.info(f"Created notification {notification.id} for customer {customer.id}")
        return notification

    def delete_notification(self, notification_id: int) -> bool:
        """Delete a notification. Returns whether a record existed."""
        return self._delete(self._notifications, "notification", notification_id)

    # =========================================================================
    # Counters
    # =========================================================================

    def count_customers(self) -> int:
        return len(self._customers.records)

    def count_products(self) -> int:
        return len(self._products.records)

    def count_templates(self) -> int:
        return len(self._templates.records)

    def count_notifications(self) -> int:
        return len(self._notifications.records)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _delete(self, collection: _Collection, kind: str, record_id: int) -> bool:
        deleted = collection.delete(record_id)
        if deleted:
            logger.info(f"Deleted {kind} {record_id}")
        return deleted

    def _load_json(self, data_dir: Path, filename: str) -> list[dict]:
        """Load a JSON fixture file."""
        filepath = data_dir / filename
        if not filepath.exists():
            return []
        with open(filepath, "r") as f:
            return json.load(f)

    def load_fixtures(self, data_dir: Path) -> None:
        """
        Seed customers, products and templates from JSON fixtures.

        Records go through the normal create path, so ids are assigned by
        this store and validation rules apply. Missing files are skipped.
        """
        data_dir = Path(data_dir)
        for item in self._load_json(data_dir, "customers.json"):
            self.create_customer(CustomerCreate.model_validate(item))
        for item in self._load_json(data_dir, "products.json"):
            self.create_product(ProductCreate.model_validate(item))
        for item in self._load_json(data_dir, "templates.json"):
            self.create_template(TemplateCreate.model_validate(item))
        logger.info(
            f"Loaded fixtures from {data_dir}: {self.count_customers()} customers, "
            f"{self.count_products()} products, {self.count_templates()} templates"
        )

    def reset(self) -> None:
        """Drop every record and restart all id counters."""
        self._customers = _Collection()
        self._products = _Collection()
        self._templates = _Collection()
        self._notifications = _Collection()
