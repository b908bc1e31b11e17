from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class MediaRecord(BaseModel):
    """
    Fields shared by every collection.

    The catalog does not enforce a shape: stored data mixes "1985" and 1985
    for `year`, lists and strings for `performers`, and records without a
    title. Every field is optional and loosely typed, and extra keys are
    allowed, so any object the admin sends is accepted and round-trips
    untouched.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    title: Optional[Any] = None
    titleEn: Optional[Any] = None
    year: Optional[Any] = None


class AudioTrack(MediaRecord):
    composer: Optional[Any] = None
    composerEn: Optional[Any] = None
    duration: Optional[Any] = None  # "M:SS", may be filled in later
    src: Optional[Any] = None
    description: Optional[Any] = None
    descriptionEn: Optional[Any] = None
    album: Optional[Any] = None
    genre: Optional[Any] = None


class VideoItem(MediaRecord):
    description: Optional[Any] = None
    descriptionEn: Optional[Any] = None
    duration: Optional[Any] = None
    thumbnail: Optional[Any] = None
    videoUrl: Optional[Any] = None
    location: Optional[Any] = None
    performers: Optional[Any] = None


class PhotoItem(MediaRecord):
    src: Optional[Any] = None
    description: Optional[Any] = None
    descriptionEn: Optional[Any] = None
    location: Optional[Any] = None
    photographer: Optional[Any] = None
    event: Optional[Any] = None
    # Never produced by a resize step; see scripts/generate_thumbnails.py
    thumbnailUrl: Optional[Any] = None
    mediumUrl: Optional[Any] = None
    largeUrl: Optional[Any] = None


class PublicationItem(MediaRecord):
    description: Optional[Any] = None
    descriptionEn: Optional[Any] = None
    type: Optional[Any] = None
    author: Optional[Any] = None
    authorEn: Optional[Any] = None
    pages: Optional[Any] = None
    size: Optional[Any] = None  # human readable, e.g. "2.3 MB"
    fileUrl: Optional[Any] = None
    language: Optional[Any] = None
    publisher: Optional[Any] = None
    isbn: Optional[Any] = None


# media type -> (array key inside the section, record model)
COLLECTIONS: dict[str, tuple[str, type[MediaRecord]]] = {
    "music": ("tracks", AudioTrack),
    "video": ("items", VideoItem),
    "photos": ("items", PhotoItem),
    "publications": ("items", PublicationItem),
}

LOCALES: tuple[str, ...] = ("ru", "en")

# URL-valued fields that may point at files under the public root
URL_FIELDS: tuple[str, ...] = (
    "src",
    "thumbnail",
    "videoUrl",
    "fileUrl",
    "thumbnailUrl",
    "mediumUrl",
    "largeUrl",
)
