import asyncio

import httpx

from app.services.preloader import ImagePreloader, PreloadProgress, collect_image_urls


class FakeImageHost:
    """Serves 200 for /img/*, 404 for anything else, and tracks concurrency."""

    def __init__(self):
        self.hits: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.hits.append(request.url.path)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0.005)
            if request.url.path.startswith("/img/"):
                return httpx.Response(200, content=b"\x89PNG")
            return httpx.Response(404)
        finally:
            self.in_flight -= 1


def _run(urls, host, **kwargs):
    updates: list[PreloadProgress] = []

    async def go():
        transport = httpx.MockTransport(host)
        async with httpx.AsyncClient(transport=transport, base_url="http://site.test") as client:
            preloader = ImagePreloader(client, batch_delay_ms=0, on_progress=updates.append, **kwargs)
            result = await preloader.preload_images(urls)
            return preloader, result

    preloader, result = asyncio.run(go())
    return preloader, result, updates


def test_every_url_is_accounted_for():
    urls = [f"/img/{i}.jpg" for i in range(4)] + [f"/missing/{i}.jpg" for i in range(3)]
    host = FakeImageHost()
    preloader, result, updates = _run(urls, host)

    assert result.total == 7
    assert result.loaded == 4
    assert result.failed == 3
    assert result.loaded + result.failed == len(urls)
    assert result.progress == 100
    assert result.isComplete and not result.isLoading

    # one update per settled image, 100% reported exactly once (the last one)
    assert len(updates) == 7
    assert [u.progress for u in updates].count(100) == 1
    assert updates[-1].progress == 100
    assert [u.loaded + u.failed for u in updates] == list(range(1, 8))


def test_batches_bound_concurrency():
    urls = [f"/img/{i}.jpg" for i in range(10)]
    host = FakeImageHost()
    _run(urls, host, batch_size=3)
    assert host.max_in_flight == 3
    assert len(host.hits) == 10


def test_known_urls_short_circuit():
    host = FakeImageHost()

    async def go():
        transport = httpx.MockTransport(host)
        async with httpx.AsyncClient(transport=transport, base_url="http://site.test") as client:
            preloader = ImagePreloader(client, batch_delay_ms=0)
            await preloader.preload_images(["/img/a.jpg", "/missing/b.jpg"])
            second = await preloader.preload_images(["/img/a.jpg", "/missing/b.jpg"])
            return preloader, second

    preloader, second = asyncio.run(go())

    assert host.hits == ["/img/a.jpg", "/missing/b.jpg"]
    assert second.loaded == 1 and second.failed == 1
    assert preloader.is_preloaded("/img/a.jpg")
    assert not preloader.is_preloaded("/missing/b.jpg")
    assert preloader.get_status("/missing/b.jpg").error


def test_unknown_url_status():
    preloader = ImagePreloader(client=None)  # type: ignore[arg-type]
    status = preloader.get_status("/never.jpg")
    assert status.url == "/never.jpg"
    assert not status.loaded


def test_empty_list_is_a_no_op():
    _, result, updates = _run([], FakeImageHost())
    assert result == PreloadProgress()
    assert updates == []


def test_collect_image_urls():
    photos = {
        "items": [
            {"id": "1", "src": "/photos/1.jpg", "thumbnailUrl": "/photos/thumbnails/1.jpg"},
            {"id": "2", "src": "/placeholder.jpg"},
            {"id": "3", "src": "/placeholder.jpg"},
            "garbage",
        ]
    }
    assert collect_image_urls("photos", photos) == ["/photos/thumbnails/1.jpg", "/placeholder.jpg"]
    assert collect_image_urls("video", {"items": [{"thumbnail": "/v.jpg"}]}) == ["/v.jpg"]
    assert collect_image_urls("music", {"tracks": [{"src": "/a.mp3"}]}) == []
