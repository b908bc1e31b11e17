"""
Warms a deployed site's image cache: reads the catalog from /api/media and
fetches every photo and video thumbnail URL in small batches.

Usage:
  python backend/scripts/warm_images.py --base-url https://example.org --locale ru
"""
from __future__ import annotations

import argparse
import asyncio

import httpx

from app.services.preloader import ImagePreloader, PreloadProgress, collect_image_urls


def _print_progress(p: PreloadProgress) -> None:
    print(f"  {p.progress:3d}%  loaded={p.loaded} failed={p.failed} / {p.total}")


async def warm(base_url: str, locale: str) -> PreloadProgress:
    async with httpx.AsyncClient(base_url=base_url, timeout=30.0, follow_redirects=True) as client:
        urls: list[str] = []
        for media_type in ("photos", "video"):
            resp = await client.get("/api/media", params={"type": media_type, "locale": locale})
            resp.raise_for_status()
            section = resp.json().get("data") or {}
            urls.extend(u for u in collect_image_urls(media_type, section) if u not in urls)

        print(f"🖼️  Preloading {len(urls)} images from {base_url}")
        preloader = ImagePreloader(client, on_progress=_print_progress)
        return await preloader.preload_images(urls)


def main() -> int:
    ap = argparse.ArgumentParser(description="Preload catalog images into caches.")
    ap.add_argument("--base-url", default="http://localhost:8000")
    ap.add_argument("--locale", default="ru", choices=["ru", "en"])
    args = ap.parse_args()

    result = asyncio.run(warm(args.base_url.rstrip("/"), args.locale))
    print(f"✅ Done: {result.loaded} loaded, {result.failed} failed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
