"""
FastAPI dependencies.

The store and factory are created by ``create_app`` and hung off
``app.state``; routes receive them through ``Depends`` instead of importing
a module-level instance.
"""

from datetime import datetime
from typing import Callable

from fastapi import Request

from notify_core.factory import NotificationFactory
from notify_core.store import EntityStore


def get_store(request: Request) -> EntityStore:
    """Get the entity store for this application."""
    return request.app.state.store


def get_factory(request: Request) -> NotificationFactory:
    """Get the notification factory for this application."""
    return request.app.state.factory


def get_clock(request: Request) -> Callable[[], datetime]:
    """Get the clock used for timestamps and the stats window."""
    return request.app.state.factory.clock
