"""
Domain errors raised by the entity store.

Missing records are not errors: store lookups return None and deletes return
False, and the API layer turns those into 404 responses. Exceptions here are
reserved for requests that conflict with data already in the store.
"""


class StoreError(Exception):
    """Base class for entity store failures."""


class DuplicateEmailError(StoreError):
    """A customer with this email address already exists."""

    def __init__(self, email: str):
        super().__init__(f"Customer with this email already exists: {email}")
        self.email = email
