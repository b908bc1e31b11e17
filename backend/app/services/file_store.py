# backend/app/services/file_store.py
from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path
from typing import Any

from app.core.config import settings
from app.models.api import UploadDescriptor
from app.services.validator import get_config

logger = logging.getLogger(__name__)


class FileStore:
    """
    Writes upload bytes to PUBLIC_DIR/<category dir>/original/.

    Names are `{category}_{unixMillis}_{uuid}{ext}` so no lookup is needed
    to avoid collisions. Writes go straight to the final path.
    """

    def __init__(self, public_root: str | Path | None = None):
        self.public_root = Path(public_root) if public_root is not None else settings.public_path

    def target_dir(self, category: str) -> Path:
        return self.public_root / get_config(category).directory / "original"

    def save(
        self,
        category: str,
        original_name: str,
        content_type: str,
        data: bytes,
        metadata: dict[str, Any] | None = None,
    ) -> UploadDescriptor:
        config = get_config(category)

        file_id = str(uuid.uuid4())
        timestamp = int(time.time() * 1000)
        extension = Path(original_name).suffix
        filename = f"{category}_{timestamp}_{file_id}{extension}"

        upload_dir = self.target_dir(category)
        upload_dir.mkdir(parents=True, exist_ok=True)
        (upload_dir / filename).write_bytes(data)

        logger.info("Stored %s upload %s (%d bytes)", category, filename, len(data))

        return UploadDescriptor(
            id=file_id,
            filename=filename,
            originalName=original_name,
            url=f"/{config.directory}/original/{filename}",
            size=len(data),
            type=content_type,
            metadata=metadata or {},
        )
