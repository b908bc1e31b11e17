from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class MediaWritePayload(BaseModel):
    """
    Body of POST/PUT /api/media.

    Every field is optional here; presence is checked by the route so the
    error message can list what is missing.
    """

    type: Optional[str] = None
    locale: Optional[str] = None
    item: Optional[Any] = None


class UploadDescriptor(BaseModel):
    id: str
    filename: str
    originalName: str
    url: str
    size: int
    type: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class GeoResponse(BaseModel):
    country: str
    locale: str
