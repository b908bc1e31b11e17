# backend/app/services/upload.py
from __future__ import annotations

import logging
from typing import Any

import orjson

from app.core.errors import StorageError, ValidationError
from app.models.api import UploadDescriptor
from app.services.file_store import FileStore
from app.services.validator import UPLOAD_CONFIGS, validate_file

logger = logging.getLogger(__name__)


# Checked before anything touches the disk
REQUIRED_METADATA: dict[str, tuple[str, ...]] = {
    "photo": ("title", "description", "year"),
    "video": ("title", "description", "year"),
    "audio": ("title", "composer", "year"),
    "document": ("title", "author", "type", "year", "language"),
}


def parse_metadata(raw: str | None) -> dict[str, Any]:
    """
    The multipart `metadata` field carries a JSON string.
    Anything unparseable (or not an object) becomes {}.
    """
    if not raw:
        return {}
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        logger.warning("Failed to parse upload metadata: %s", e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Upload metadata is not an object, ignoring it")
        return {}
    return data


def missing_metadata(category: str, metadata: dict[str, Any]) -> list[str]:
    return [f for f in REQUIRED_METADATA[category] if not metadata.get(f)]


class UploadPipeline:
    """
    validate -> store -> descriptor (with the metadata passed through).

    Writing a catalog record is the caller's job; derived assets
    (thumbnails, waveforms, previews, durations) are not produced here.
    """

    def __init__(self, category: str, store: FileStore | None = None):
        if category not in UPLOAD_CONFIGS:
            raise ValueError(f"Unknown upload category: {category}")
        self.category = category
        self.store = store or FileStore()

    def check_metadata(self, metadata: dict[str, Any]) -> None:
        missing = missing_metadata(self.category, metadata)
        if missing:
            raise ValidationError(f"Missing required metadata: {', '.join(missing)}")

    def run(
        self,
        original_name: str,
        content_type: str | None,
        data: bytes,
        metadata: dict[str, Any],
    ) -> UploadDescriptor:
        result = validate_file(self.category, content_type, len(data))
        if not result.valid:
            raise ValidationError(result.error or "Upload failed")

        try:
            return self.store.save(
                self.category,
                original_name=original_name,
                content_type=content_type or "",
                data=data,
                metadata=metadata,
            )
        except OSError as e:
            logger.exception("%s upload could not be stored", self.category.capitalize())
            raise StorageError("Internal server error") from e
