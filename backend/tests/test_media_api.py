import pytest

from app.core.config import settings


def _section(client, media_type, locale):
    r = client.get("/api/media", params={"type": media_type, "locale": locale})
    assert r.status_code == 200
    return r.json()["data"]


def test_get_whole_catalog(client):
    r = client.get("/api/media")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert set(body["data"]) == {"ru", "en"}


def test_get_section_defaults_to_russian(client):
    section = client.get("/api/media", params={"type": "video"}).json()["data"]
    assert section["watchVideo"] == "Смотреть видео"
    assert len(section["items"]) == 4


def test_get_section_includes_labels(client):
    section = _section(client, "music", "en")
    assert section["listTitle"] == "List of Works"
    assert len(section["tracks"]) == 6


def test_get_unknown_type(client):
    r = client.get("/api/media", params={"type": "films"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid type or locale"}


def test_post_then_get_round_trip(client):
    item = {
        "title": "Прелюдия №13",
        "composer": "М. Тертерян",
        "duration": "2:10",
        "src": "/audio/p13.mp3",
    }
    r = client.post("/api/media", json={"type": "music", "locale": "ru", "item": item})
    assert r.status_code == 200
    data = r.json()["data"]
    assert isinstance(data["id"], str) and data["id"]

    tracks = _section(client, "music", "ru")["tracks"]
    assert {**item, "id": data["id"]} in tracks
    assert settings.catalog_path.exists()


def test_post_missing_params(client):
    r = client.post("/api/media", json={"type": "music", "locale": "ru"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Missing required parameters: type, locale, item"}


def test_post_invalid_locale(client):
    r = client.post("/api/media", json={"type": "music", "locale": "de", "item": {"title": "x"}})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid type or locale"


@pytest.mark.parametrize(
    "media_type,locale,item",
    [
        ("music", "ru", {"composer": "X", "src": "/a.mp3"}),
        ("video", "en", {"title": "t", "performers": ["A", "B"]}),
        ("publications", "ru", {"title": "Статья", "pages": "12-14", "year": 1985}),
    ],
)
def test_post_stores_any_item_shape(client, workspace, media_type, locale, item):
    r = client.post("/api/media", json={"type": media_type, "locale": locale, "item": item})
    assert r.status_code == 200
    stored = r.json()["data"]
    assert stored == {**item, "id": stored["id"]}

    key = "tracks" if media_type == "music" else "items"
    assert stored in _section(client, media_type, locale)[key]


def test_post_malformed_body(client):
    r = client.post("/api/media", content=b"{oops", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_post_does_not_touch_other_locale(client):
    before = _section(client, "photos", "ru")["items"]
    r = client.post(
        "/api/media",
        json={"type": "photos", "locale": "en", "item": {"title": "Only in English", "src": "/x.jpg"}},
    )
    assert r.status_code == 200
    assert _section(client, "photos", "ru")["items"] == before
    assert len(_section(client, "photos", "en")["items"]) == len(before) + 1


def test_put_is_idempotent(client):
    item = {"id": "3", "title": "Concert, remastered", "description": "new", "year": 1983}
    body = {"type": "photos", "locale": "en", "item": item}

    assert client.put("/api/media", json=body).status_code == 200
    once = _section(client, "photos", "en")["items"]
    assert client.put("/api/media", json=body).status_code == 200
    twice = _section(client, "photos", "en")["items"]

    assert once == twice
    assert item in twice


def test_put_requires_id(client):
    r = client.put("/api/media", json={"type": "music", "locale": "ru", "item": {"title": "x"}})
    assert r.status_code == 400
    assert r.json()["error"] == "Missing required parameters: type, locale, item with id"


def test_put_unknown_id(client):
    r = client.put("/api/media", json={"type": "music", "locale": "ru", "item": {"id": "404", "title": "x"}})
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Item not found"}


def test_delete_unknown_id(client):
    r = client.delete("/api/media", params={"type": "photos", "locale": "en", "id": "999"})
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Item not found"}


def test_delete_is_final(client):
    r = client.delete("/api/media", params={"type": "publications", "locale": "ru", "id": "2"})
    assert r.status_code == 200
    assert r.json()["success"] is True

    ids = [p["id"] for p in _section(client, "publications", "ru")["items"]]
    assert "2" not in ids
    assert "2" in [p["id"] for p in _section(client, "publications", "en")["items"]]


def test_delete_missing_params(client):
    r = client.delete("/api/media", params={"type": "photos", "locale": "en"})
    assert r.status_code == 400
    assert r.json()["error"] == "Missing required parameters: type, locale, id"


def test_write_failure_is_500(client, workspace, monkeypatch):
    blocker = workspace / "blocker"
    blocker.write_text("x", encoding="utf-8")
    monkeypatch.setattr(settings, "data_dir", str(blocker))

    r = client.post("/api/media", json={"type": "music", "locale": "ru", "item": {"title": "x"}})
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Failed to save media data"}


def test_health(client):
    assert client.get("/health").json() == {"ok": True, "service": "terteryan-media", "env": settings.env}
