"""
Notification template interpolation.

Templates are plain strings with ``{{entity.field}}`` placeholders, for example::

    Hi {{customer.name}}, {{product.name}} is back in stock: {{product.storeLink}}

Design decisions:
- The token set is closed: customer name/email/phone and product
  name/description/store link/thumbnail URL
- Substitution is a single regex pass, so every occurrence is replaced and
  substituted values are never scanned again for placeholders
- Unrecognized tokens are left verbatim (no error)
- Missing or null field values render as the empty string
"""

import re
from typing import Optional

from notify_core.models import Customer, Product

DEFAULT_MESSAGE = "Default notification message"

PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z_][\w.]*)\}\}")

# Placeholder name -> (record kind, attribute name)
PLACEHOLDERS: dict[str, tuple[str, str]] = {
    "customer.name": ("customer", "name"),
    "customer.email": ("customer", "email"),
    "customer.phoneNumber": ("customer", "phone_number"),
    "product.name": ("product", "name"),
    "product.description": ("product", "description"),
    "product.storeLink": ("product", "store_link"),
    "product.thumbnailUrl": ("product", "thumbnail_url"),
}


def interpolate(template: str, customer: Optional[Customer], product: Optional[Product]) -> str:
    """
    Render a template for one customer and one product.

    Args:
        template: Template body containing ``{{...}}`` placeholders
        customer: Customer whose fields fill ``customer.*`` tokens
        product: Product whose fields fill ``product.*`` tokens

    Returns:
        The rendered body. Calling this again with the same inputs yields
        the same string.
    """
    records = {"customer": customer, "product": product}

    def replace(match: re.Match) -> str:
        placeholder = PLACEHOLDERS.get(match.group(1))
        if placeholder is None:
            return match.group(0)
        kind, attribute = placeholder
        value = getattr(records[kind], attribute, None)
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(replace, template)


def find_placeholders(template: str) -> list[str]:
    """List the placeholder names in a template, in order of first appearance."""
    seen: list[str] = []
    for name in PLACEHOLDER_PATTERN.findall(template):
        if name not in seen:
            seen.append(name)
    return seen


def render_body(
    template: Optional[str],
    customer: Optional[Customer],
    product: Optional[Product],
) -> str:
    """
    Pick the notification body for a customer.

    With both a template and a product the template is interpolated; with
    only a template its raw text is used; with no template the fixed
    DEFAULT_MESSAGE is returned.
    """
    if template is None:
        return DEFAULT_MESSAGE
    if product is None:
        return template
    return interpolate(template, customer, product)
