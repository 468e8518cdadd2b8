"""
Tests for the NotificationFactory.

These tests verify one-notification-per-customer creation, the body
selection rules and the skip policy for unknown customers.
"""

from notify_core.factory import NotificationFactory
from notify_core.models import CustomerCreate, ProductCreate, TemplateCreate
from notify_core.store import EntityStore
from notify_core.templates import DEFAULT_MESSAGE


class TestCreateNotifications:
    """Tests for create_notifications()."""

    def test_one_per_customer(self, factory: NotificationFactory, seeded_store: EntityStore):
        created = factory.create_notifications(product_ids=[1], customer_ids=[1, 2, 3])

        assert len(created) == 3
        assert [n.customer_id for n in created] == [1, 2, 3]
        assert seeded_store.count_notifications() == 3

    def test_unknown_customers_skipped(self, factory: NotificationFactory):
        """Test that customer 999 is skipped without failing the batch."""
        created = factory.create_notifications(product_ids=[1], customer_ids=[1, 2, 999])

        assert len(created) == 2
        assert [n.customer_id for n in created] == [1, 2]
        assert all(n.product_ids == [1] for n in created)

    def test_preserves_customer_order(self, factory: NotificationFactory):
        created = factory.create_notifications(product_ids=[1], customer_ids=[3, 1, 2])

        assert [n.customer_id for n in created] == [3, 1, 2]

    def test_interpolates_with_first_product(
        self,
        factory: NotificationFactory,
        john_customer_id: int,
        launch_template_id: int,
    ):
        created = factory.create_notifications(
            product_ids=[2, 1],
            customer_ids=[john_customer_id],
            template_id=launch_template_id,
        )

        body = created[0].notification_body
        assert body.startswith("Hi John Smith, exciting news! We've just launched MacBook Air M2")
        assert "https://apple.com/macbook-air-m2" in body
        assert created[0].product_ids == [2, 1]
        assert created[0].template_id == launch_template_id

    def test_customer_phone_token(
        self,
        factory: NotificationFactory,
        sarah_customer_id: int,
        update_template_id: int,
    ):
        created = factory.create_notifications([1], [sarah_customer_id], update_template_id)

        assert created[0].notification_body == (
            "Hello Sarah Johnson, we've updated iPhone 15 Pro! "
            "Contact us at +1-555-0124 if you have questions."
        )

    def test_without_template_uses_default_message(self, factory: NotificationFactory):
        created = factory.create_notifications(product_ids=[1], customer_ids=[1])

        assert created[0].notification_body == DEFAULT_MESSAGE
        assert created[0].template_id is None

    def test_template_without_resolvable_product_uses_raw_text(self, store: EntityStore, clock):
        customer = store.create_customer(
            CustomerCreate(name="Ana", email="ana@example.com", phone_number="1")
        )
        template = store.create_template(TemplateCreate(name="t", template="Hi {{customer.name}}"))
        factory = NotificationFactory(store, clock=clock)

        created = factory.create_notifications([42], [customer.id], template.id)

        assert created[0].notification_body == "Hi {{customer.name}}"

    def test_snapshot_and_timestamp(self, factory: NotificationFactory, clock):
        created = factory.create_notifications(product_ids=[1], customer_ids=[1])

        notification = created[0]
        assert notification.customer_email == "john@example.com"
        assert notification.customer_name == "John Smith"
        assert notification.customer_phone == "+1-555-0123"
        assert notification.timestamp == clock.now

    def test_empty_customer_list(self, factory: NotificationFactory, seeded_store: EntityStore):
        assert factory.create_notifications(product_ids=[1], customer_ids=[]) == []
        assert seeded_store.count_notifications() == 0

    def test_inactive_product_still_usable(self, store: EntityStore, clock):
        """Active flag only filters listings; it does not block notifications."""
        customer = store.create_customer(
            CustomerCreate(name="Ana", email="ana@example.com", phone_number="1")
        )
        product = store.create_product(ProductCreate(name="Retired", is_active=False))
        template = store.create_template(TemplateCreate(name="t", template="{{product.name}}"))

        created = NotificationFactory(store, clock=clock).create_notifications(
            [product.id], [customer.id], template.id
        )

        assert created[0].notification_body == "Retired"
