"""Routers for each REST resource."""

from api.routers import customers, meta, notifications, products, templates

__all__ = ["customers", "meta", "notifications", "products", "templates"]
