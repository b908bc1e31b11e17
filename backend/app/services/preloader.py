# backend/app/services/preloader.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreloadProgress:
    total: int = 0
    loaded: int = 0
    failed: int = 0
    progress: int = 0  # 0-100
    isComplete: bool = False
    isLoading: bool = False


@dataclass(frozen=True)
class PreloadedImage:
    url: str
    loaded: bool
    error: bool = False


ProgressCallback = Callable[[PreloadProgress], None]


class ImagePreloader:
    """
    Best-effort warm-up of image URLs.

    URLs are fetched in fixed-size batches; a batch runs concurrently and
    must settle before the next one starts. Every URL's outcome is kept in
    `statuses` and later calls for a known URL reuse it (no retries).
    Nothing here raises on a failed image; it is only counted.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        batch_size: int | None = None,
        batch_delay_ms: int | None = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.client = client
        self.batch_size = batch_size or settings.preload_batch_size
        self.batch_delay_ms = settings.preload_batch_delay_ms if batch_delay_ms is None else batch_delay_ms
        self.on_progress = on_progress
        self.statuses: dict[str, PreloadedImage] = {}
        self.progress = PreloadProgress()

    async def preload_image(self, url: str) -> bool:
        known = self.statuses.get(url)
        if known is not None:
            return known.loaded

        try:
            resp = await self.client.get(url)
            resp.raise_for_status()
            ok = True
        except httpx.HTTPError as e:
            logger.debug("Preload failed for %s: %s", url, e)
            ok = False

        self.statuses[url] = PreloadedImage(url=url, loaded=ok, error=not ok)
        return ok

    async def preload_images(self, urls: list[str]) -> PreloadProgress:
        if not urls:
            return self.progress

        total = len(urls)
        counts = {"loaded": 0, "failed": 0}
        self._set(PreloadProgress(total=total, isLoading=True))

        async def _one(url: str) -> None:
            if await self.preload_image(url):
                counts["loaded"] += 1
            else:
                counts["failed"] += 1

            done = counts["loaded"] + counts["failed"]
            self._set(
                replace(
                    self.progress,
                    loaded=counts["loaded"],
                    failed=counts["failed"],
                    progress=int(done * 100 / total + 0.5),
                    isComplete=done == total,
                    isLoading=done < total,
                ),
                notify=True,
            )

        for start in range(0, total, self.batch_size):
            batch = urls[start:start + self.batch_size]
            await asyncio.gather(*(_one(u) for u in batch))
            await asyncio.sleep(self.batch_delay_ms / 1000)

        self._set(replace(self.progress, isComplete=True, isLoading=False))
        return self.progress

    def is_preloaded(self, url: str) -> bool:
        status = self.statuses.get(url)
        return bool(status and status.loaded)

    def get_status(self, url: str) -> PreloadedImage:
        return self.statuses.get(url) or PreloadedImage(url=url, loaded=False)

    def _set(self, progress: PreloadProgress, notify: bool = False) -> None:
        self.progress = progress
        if notify and self.on_progress is not None:
            self.on_progress(progress)


def collect_image_urls(media_type: str, section: dict[str, Any]) -> list[str]:
    """Image URLs worth warming for one catalog section, de-duplicated in order."""
    if media_type == "photos":
        fields: Iterable[str] = ("thumbnailUrl", "src")
    elif media_type == "video":
        fields = ("thumbnail",)
    else:
        return []

    seen: dict[str, None] = {}
    for record in section.get("items") or []:
        if not isinstance(record, dict):
            continue
        for field in fields:
            value = record.get(field)
            if isinstance(value, str) and value:
                seen.setdefault(value, None)
                break
    return list(seen)
