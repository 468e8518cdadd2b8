"""
Bulk notification creation.

The factory turns one request (products, customers, optional template) into
one stored notification per customer.

Design decisions:
- Only the first product is used for interpolation; every product id is
  still recorded on each notification
- Unknown customer ids are skipped, not fatal. The HTTP layer validates
  every id up front, so this only matters for direct callers
- The clock is injectable so tests can control timestamps
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from notify_core.models import Notification, utc_now
from notify_core.store import EntityStore
from notify_core.templates import render_body

logger = logging.getLogger("notification_factory")


class NotificationFactory:
    """
    Creates notifications for a batch of customers.

    Example:
        factory = NotificationFactory(store)
        created = factory.create_notifications(
            product_ids=[1], customer_ids=[1, 2], template_id=3,
        )
    """

    def __init__(
        self,
        store: EntityStore,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.clock = clock or utc_now

    def create_notifications(
        self,
        product_ids: list[int],
        customer_ids: list[int],
        template_id: Optional[int] = None,
    ) -> list[Notification]:
        """
        Create one notification per resolvable customer.

        Args:
            product_ids: Products the notification is about (first one is
                used for template interpolation)
            customer_ids: Recipients, in the order notifications are created
            template_id: Optional template to render

        Returns:
            Created notifications, in the order customer ids were given.
            Never raises for unknown ids.
        """
        template = self.store.get_template(template_id) if template_id is not None else None
        product = self.store.get_product(product_ids[0]) if product_ids else None
        template_body = template.template if template else None

        created = []
        for customer_id in customer_ids:
            customer = self.store.get_customer(customer_id)
            if not customer:
                logger.warning(f"Skipping unknown customer {customer_id}")
                continue

            notification = self.store.create_notification(
                customer=customer,
                notification_body=render_body(template_body, customer, product),
                product_ids=product_ids,
                template_id=template_id,
                timestamp=self.clock(),
            )
            created.append(notification)

        logger.info(
            f"Created {len(created)}/{len(customer_ids)} notifications "
            f"(template={template_id}, products={product_ids})"
        )
        return created
