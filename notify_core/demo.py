"""
Demonstration script for the notification workflow.

Seeds a store with the bundled sample data, then creates one batch of
notifications per sample template and prints the rendered bodies.
"""

from pathlib import Path
from typing import Optional

from notify_core.config import DEFAULT_DATA_DIR, configure_logging
from notify_core.factory import NotificationFactory
from notify_core.models import Notification
from notify_core.store import EntityStore


def run_template_demo(data_dir: Optional[Path] = None) -> list[Notification]:
    """
    Render every sample template for every sample customer.

    Uses the first active product for interpolation, the same way a
    notification request from the front end would.
    """
    configure_logging("WARNING")

    print("\n" + "=" * 70)
    print("DEMO: Template interpolation and bulk notification creation")
    print("=" * 70 + "\n")

    store = EntityStore()
    store.load_fixtures(data_dir or DEFAULT_DATA_DIR)
    factory = NotificationFactory(store)

    customers = store.get_customers()
    products = store.get_active_products()
    if not customers or not products:
        print("No sample customers or products found; nothing to do.")
        return []

    customer_ids = [c.id for c in customers]
    product_ids = [products[0].id]

    created = []
    for template in store.get_templates():
        print("-" * 70)
        print(f"TEMPLATE #{template.id}: {template.name}")
        print(f"  {template.template}")
        print("-" * 70)
        batch = factory.create_notifications(product_ids, customer_ids, template.id)
        for notification in batch:
            print(f"  -> {notification.customer_email}: {notification.notification_body}")
        print("")
        created.extend(batch)

    print(f"Created {len(created)} notifications for {len(customers)} customers.")
    return created
