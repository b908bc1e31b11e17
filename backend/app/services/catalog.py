# backend/app/services/catalog.py
from __future__ import annotations

import copy
import logging
import os
import threading
import time
from pathlib import Path
from typing import Any

import orjson
from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.core.errors import NotFoundError, StorageError, ValidationError
from app.data.defaults import DEFAULT_MEDIA_DATA
from app.models.media import COLLECTIONS, LOCALES

logger = logging.getLogger(__name__)

# Serializes read-modify-write cycles inside this process.
_WRITE_LOCK = threading.Lock()


def _loads(data: bytes) -> Any:
    return orjson.loads(data)


def _dumps(obj: Any) -> bytes:
    return orjson.dumps(obj, option=orjson.OPT_INDENT_2)


def _now_id() -> str:
    return str(int(time.time() * 1000))


def default_catalog() -> dict[str, Any]:
    return copy.deepcopy(DEFAULT_MEDIA_DATA)


def _same_id(record: Any, item_id: Any) -> bool:
    # Query-string ids are strings; stored ids may be numbers
    return isinstance(record, dict) and str(record.get("id")) == str(item_id)


class CatalogService:
    """
    The media catalog is one JSON document on local disk:

        {
          "ru": {"music": {"tracks": [...], "listTitle": ...},
                 "video": {"items": [...], ...},
                 "photos": {"items": [...], ...},
                 "publications": {"items": [...], ...}},
          "en": {...}
        }

    This service:
    - re-reads the file on every call (no cache between requests)
    - falls back to the built-in document when the file is missing/corrupt
    - rewrites the whole document on every mutation
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else settings.catalog_path

    # -------------------------
    # Document I/O
    # -------------------------

    def read(self) -> dict[str, Any]:
        if not self.path.exists():
            return default_catalog()

        try:
            data = _loads(self.path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            logger.error("Error reading media data from %s: %s", self.path, e)
            return default_catalog()

        if not isinstance(data, dict):
            logger.error("Media data in %s is not an object, using defaults", self.path)
            return default_catalog()
        return data

    def write(self, data: dict[str, Any]) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(_dumps(data))
            os.replace(tmp, self.path)
        except OSError as e:
            logger.exception("Error writing media data to %s", self.path)
            raise StorageError("Failed to save media data") from e

    # -------------------------
    # Public read APIs
    # -------------------------

    def get(self, media_type: str | None = None, locale: str = "ru") -> Any:
        """
        Whole document when `media_type` is None, else the section container
        (records plus its UI label strings) for that locale.
        """
        data = self.read()
        if media_type is None:
            return data
        return self._section(data, media_type, locale)

    def list_items(self, media_type: str, locale: str) -> list[dict]:
        data = self.read()
        return self.records(data, media_type, locale)

    # -------------------------
    # Admin write APIs
    # -------------------------

    def add_item(self, media_type: str, locale: str, item: dict) -> dict:
        self._validate_item(media_type, locale, item)
        if not item.get("id"):
            item["id"] = _now_id()

        with _WRITE_LOCK:
            data = self.read()
            self.records(data, media_type, locale).append(item)
            self.write(data)

        logger.info("Added %s/%s item id=%s", locale, media_type, item["id"])
        return item

    def update_item(self, media_type: str, locale: str, item: dict) -> dict:
        self._validate_item(media_type, locale, item)
        if not item.get("id"):
            raise ValidationError("Missing required parameters: type, locale, item with id")

        with _WRITE_LOCK:
            data = self.read()
            records = self.records(data, media_type, locale)
            index = next((i for i, r in enumerate(records) if _same_id(r, item["id"])), None)
            if index is None:
                raise NotFoundError("Item not found")
            records[index] = item
            self.write(data)

        logger.info("Updated %s/%s item id=%s", locale, media_type, item["id"])
        return item

    def delete_item(self, media_type: str, locale: str, item_id: str) -> None:
        with _WRITE_LOCK:
            data = self.read()
            records = self.records(data, media_type, locale)
            index = next((i for i, r in enumerate(records) if _same_id(r, item_id)), None)
            if index is None:
                raise NotFoundError("Item not found")
            del records[index]
            self.write(data)

        logger.info("Deleted %s/%s item id=%s", locale, media_type, item_id)

    # -------------------------
    # Helpers
    # -------------------------

    @staticmethod
    def _section(data: dict[str, Any], media_type: str, locale: str) -> dict[str, Any]:
        if locale not in LOCALES or media_type not in COLLECTIONS:
            raise ValidationError("Invalid type or locale")

        locale_data = data.get(locale)
        section = locale_data.get(media_type) if isinstance(locale_data, dict) else None
        if not isinstance(section, dict):
            raise ValidationError("Invalid type or locale")
        return section

    def records(self, data: dict[str, Any], media_type: str, locale: str) -> list[dict]:
        section = self._section(data, media_type, locale)
        key, _ = COLLECTIONS[media_type]
        records = section.setdefault(key, [])
        if not isinstance(records, list):
            raise StorageError(f"Catalog section {locale}.{media_type}.{key} is not a list")
        return records

    @staticmethod
    def _validate_item(media_type: str, locale: str, item: Any) -> None:
        if locale not in LOCALES or media_type not in COLLECTIONS:
            raise ValidationError("Invalid type or locale")
        if not isinstance(item, dict):
            raise ValidationError("Item must be a JSON object")

        _, model = COLLECTIONS[media_type]
        try:
            model.model_validate(item)
        except PydanticValidationError as e:
            fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
            raise ValidationError(f"Invalid {media_type} item: {', '.join(fields)}") from e
