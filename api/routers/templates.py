"""Notification template endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.dependencies import get_store
from notify_core.models import NotificationTemplate, TemplateCreate, TemplateUpdate
from notify_core.store import EntityStore
from notify_core.templates import PLACEHOLDERS

router = APIRouter(prefix="/templates", tags=["Templates"])


@router.get("", response_model=list[NotificationTemplate])
def list_templates(store: EntityStore = Depends(get_store)):
    """Get all templates, newest first."""
    return store.get_templates()


# Declared before /{template_id} so "placeholders" is not parsed as an id
@router.get("/placeholders")
def list_placeholders():
    """Placeholders the interpolator understands, for the template editor."""
    return [{"token": "{{" + name + "}}", "source": kind} for name, (kind, _) in PLACEHOLDERS.items()]


@router.get("/{template_id}", response_model=NotificationTemplate)
def get_template(template_id: int, store: EntityStore = Depends(get_store)):
    """Get a template by ID."""
    template = store.get_template(template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    return template


@router.post("", response_model=NotificationTemplate, status_code=status.HTTP_201_CREATED)
def create_template(payload: TemplateCreate, store: EntityStore = Depends(get_store)):
    """Create a template."""
    return store.create_template(payload)


@router.put("/{template_id}", response_model=NotificationTemplate)
def update_template(
    template_id: int,
    payload: TemplateUpdate,
    store: EntityStore = Depends(get_store),
):
    """Partially update a template. createdAt cannot be changed."""
    template = store.update_template(template_id, payload.changes())
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    return template


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_template(template_id: int, store: EntityStore = Depends(get_store)):
    """Delete a template. Notifications keep the template id they were created with."""
    if not store.delete_template(template_id):
        raise HTTPException(status_code=404, detail="Template not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
