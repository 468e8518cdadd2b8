"""
REST API for the product notification manager.

This package provides the FastAPI application that exposes the entity store
and notification factory to the web front end.
"""

from api.main import app, create_app

__all__ = ["app", "create_app"]
