from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from app.core.errors import ValidationError
from app.models.api import MediaWritePayload
from app.services.catalog import CatalogService

router = APIRouter()


@router.get("")
def get_media(
    media_type: Optional[str] = Query(default=None, alias="type"),
    locale: str = "ru",
):
    """
    Whole catalog, or one section (e.g. `?type=music&locale=en`) including
    its UI label strings.
    """
    data = CatalogService().get(media_type or None, locale or "ru")
    return {"success": True, "data": data}


@router.post("")
def add_media(payload: MediaWritePayload):
    if not payload.type or not payload.locale or not payload.item:
        raise ValidationError("Missing required parameters: type, locale, item")

    item = CatalogService().add_item(payload.type, payload.locale, payload.item)
    return {"success": True, "data": item}


@router.put("")
def update_media(payload: MediaWritePayload):
    item = payload.item
    if not payload.type or not payload.locale or not isinstance(item, dict) or not item.get("id"):
        raise ValidationError("Missing required parameters: type, locale, item with id")

    item = CatalogService().update_item(payload.type, payload.locale, item)
    return {"success": True, "data": item}


@router.delete("")
def delete_media(
    media_type: Optional[str] = Query(default=None, alias="type"),
    locale: Optional[str] = None,
    item_id: Optional[str] = Query(default=None, alias="id"),
):
    if not media_type or not locale or not item_id:
        raise ValidationError("Missing required parameters: type, locale, id")

    CatalogService().delete_item(media_type, locale, item_id)
    return {"success": True, "message": "Item deleted successfully"}
