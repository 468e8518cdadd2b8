"""
Dashboard statistics and API self-documentation.
"""

from datetime import timedelta

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_clock, get_store
from notify_core.models import Stats
from notify_core.store import EntityStore

router = APIRouter(tags=["Meta"])

STATS_WINDOW = timedelta(days=7)


@router.get("/stats", response_model=Stats)
def get_stats(store: EntityStore = Depends(get_store), clock=Depends(get_clock)):
    """
    Aggregate counters for the dashboard.

    ``thisWeek`` counts notifications created during the trailing 7 days.
    """
    week_ago = clock() - STATS_WINDOW
    return Stats(
        total_notifications=store.count_notifications(),
        active_products=len(store.get_active_products()),
        total_customers=store.count_customers(),
        this_week=len(store.get_notifications_by_date_range(start=week_ago)),
    )


@router.get("")
def describe_api(request: Request):
    """Machine-readable description of the REST API."""
    return {
        "title": request.app.title,
        "version": request.app.version,
        "description": "REST API for managing products, customers, and notifications",
        "baseUrl": str(request.base_url).rstrip("/") + "/api",
        "endpoints": API_ENDPOINTS,
        "schemas": API_SCHEMAS,
        "examples": API_EXAMPLES,
    }


API_ENDPOINTS = {
    "customers": {
        "GET /api/customers": "Get all customers",
        "GET /api/customers/:id": "Get customer by ID",
        "POST /api/customers": "Create new customer",
        "PUT /api/customers/:id": "Update customer",
        "DELETE /api/customers/:id": "Delete customer",
    },
    "products": {
        "GET /api/products": "Get all products (use ?active=true for active only)",
        "GET /api/products/:id": "Get product by ID",
        "POST /api/products": "Create new product",
        "PUT /api/products/:id": "Update product",
        "DELETE /api/products/:id": "Delete product",
    },
    "notifications": {
        "GET /api/notifications": "Get all notifications (supports ?from=date&to=date filtering)",
        "GET /api/notifications/:id": "Get notification by ID",
        "POST /api/notifications": "Create one notification per customer",
        "DELETE /api/notifications/:id": "Delete notification",
    },
    "templates": {
        "GET /api/templates": "Get all notification templates",
        "GET /api/templates/placeholders": "List supported template placeholders",
        "GET /api/templates/:id": "Get template by ID",
        "POST /api/templates": "Create new template",
        "PUT /api/templates/:id": "Update template",
        "DELETE /api/templates/:id": "Delete template",
    },
    "stats": {
        "GET /api/stats": "Get application statistics",
    },
}

API_SCHEMAS = {
    "Customer": {
        "id": "number",
        "name": "string",
        "email": "string",
        "phoneNumber": "string",
    },
    "Product": {
        "id": "number",
        "name": "string",
        "description": "string | null",
        "storeLink": "string | null",
        "thumbnailUrl": "string | null",
        "isActive": "boolean (1/0 accepted on input)",
    },
    "Notification": {
        "id": "number",
        "customerId": "number",
        "customerEmail": "string",
        "customerName": "string",
        "customerPhone": "string | null",
        "notificationBody": "string",
        "templateId": "number | null",
        "productIds": "number[]",
        "timestamp": "ISO 8601 datetime",
    },
    "NotificationTemplate": {
        "id": "number",
        "name": "string",
        "template": "string",
        "description": "string | null",
        "isDefault": "boolean (1/0 accepted on input)",
        "createdAt": "ISO 8601 datetime",
    },
}

API_EXAMPLES = {
    "createCustomer": {
        "method": "POST",
        "url": "/api/customers",
        "body": {
            "name": "John Doe",
            "email": "john@example.com",
            "phoneNumber": "+1-555-0123",
        },
    },
    "createProduct": {
        "method": "POST",
        "url": "/api/products",
        "body": {
            "name": "iPhone 15",
            "description": "Latest smartphone",
            "storeLink": "https://apple.com/iphone-15",
            "thumbnailUrl": "https://example.com/iphone15.jpg",
            "isActive": True,
        },
    },
    "createNotification": {
        "method": "POST",
        "url": "/api/notifications",
        "body": {
            "templateId": 1,
            "productIds": [1, 2],
            "customerIds": [1, 2, 3],
        },
    },
    "dateRangeQuery": {
        "method": "GET",
        "url": "/api/notifications?from=2024-01-01T00:00:00Z&to=2024-12-31T23:59:59Z",
        "description": "Get notifications within date range",
    },
}
