"""
Domain models for the product notification manager.

These models represent the four entity kinds held by the EntityStore
(customers, products, notification templates, notifications) and the
payload shapes accepted when creating or updating them.

Design decisions:
- Using Pydantic for validation and serialization
- Python attributes are snake_case, the wire format is camelCase
  (alias generator + populate_by_name, so both spellings are accepted)
- Stored entities are frozen; the store replaces records with modified
  copies instead of mutating them in place
- Booleans are real bools; legacy 0/1 input is still accepted
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class ApiModel(BaseModel):
    """Base for every model that crosses the HTTP boundary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Entity(ApiModel):
    """Base for records owned by the store."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class PartialUpdate(ApiModel):
    """
    Base for partial-update payloads.

    Only fields present in the request body are applied. Required columns
    may be omitted but may not be sent as an explicit null.
    """

    def changes(self) -> dict:
        """Fields the client actually supplied, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


def _reject_null(value):
    if value is None:
        raise ValueError("field may not be null")
    return value


# =============================================================================
# Customers
# =============================================================================

class CustomerCreate(ApiModel):
    """Payload for creating a customer."""
    name: str = Field(..., min_length=1, description="Customer display name")
    email: EmailStr = Field(..., description="Primary email address (unique)")
    phone_number: str = Field(..., min_length=1, description="Contact phone number")


class CustomerUpdate(PartialUpdate):
    """Payload for partially updating a customer."""
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(default=None, min_length=1)

    @field_validator("name", "email", "phone_number")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class Customer(Entity):
    """
    Customer entity - the recipient of notifications.

    Notifications keep a snapshot of these fields, so later edits to a
    customer do not rewrite notification history.
    """
    id: int = Field(..., description="Unique, monotonic customer identifier")
    name: str
    email: str
    phone_number: str


# =============================================================================
# Products
# =============================================================================

class ProductCreate(ApiModel):
    """Payload for creating a product."""
    name: str = Field(..., min_length=1, description="Product display name")
    description: Optional[str] = None
    store_link: Optional[str] = Field(default=None, description="Where to buy it")
    thumbnail_url: Optional[str] = None
    is_active: bool = Field(default=True, description="Accepts true/false or 1/0")


class ProductUpdate(PartialUpdate):
    """Payload for partially updating a product."""
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    store_link: Optional[str] = None
    thumbnail_url: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "is_active")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class Product(Entity):
    """Product entity from the catalog."""
    id: int
    name: str
    description: Optional[str] = None
    store_link: Optional[str] = None
    thumbnail_url: Optional[str] = None
    is_active: bool = True


# =============================================================================
# Notification Templates
# =============================================================================

class TemplateCreate(ApiModel):
    """Payload for creating a notification template."""
    name: str = Field(..., min_length=1)
    template: str = Field(..., min_length=1, description="Body with {{placeholder}} tokens")
    description: Optional[str] = None
    is_default: bool = Field(default=False, description="Accepts true/false or 1/0")


class TemplateUpdate(PartialUpdate):
    """Payload for partially updating a template. created_at is not editable."""
    name: Optional[str] = Field(default=None, min_length=1)
    template: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    is_default: Optional[bool] = None

    @field_validator("name", "template", "is_default")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class NotificationTemplate(Entity):
    """A reusable notification body with placeholder tokens."""
    id: int
    name: str
    template: str
    description: Optional[str] = None
    is_default: bool = False
    created_at: datetime = Field(default_factory=utc_now)


# =============================================================================
# Notifications
# =============================================================================

class NotificationCreate(ApiModel):
    """
    Request to create notifications.

    One notification is produced per customer. Only the first product is
    used for template interpolation, but every product id is recorded.
    """
    product_ids: list[int] = Field(..., min_length=1, description="Products to notify about")
    customer_ids: list[int] = Field(..., min_length=1, description="Customers to notify")
    template_id: Optional[int] = Field(default=None, description="Template to render")


class Notification(Entity):
    """
    A sent notification.

    Append-only: notifications are never updated, only deleted. Customer
    fields are a snapshot taken when the notification was created.
    """
    id: int
    customer_id: int
    customer_email: str
    customer_name: str
    customer_phone: Optional[str] = None
    notification_body: str
    template_id: Optional[int] = None
    product_ids: list[int] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=utc_now)


# =============================================================================
# Aggregates
# =============================================================================

class Stats(ApiModel):
    """Dashboard counters."""
    total_notifications: int
    active_products: int
    total_customers: int
    this_week: int
