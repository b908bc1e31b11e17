#!/usr/bin/env python3
# backend/tests/smoke_backend.py
#
# Smoke-test against a running media API.
#
# Usage (server started with `uvicorn app.main:app` from backend/):
#   python ./tests/smoke_backend.py

from __future__ import annotations

import json
import os
import uuid
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class HttpResult:
    status: int
    headers: Dict[str, str]
    body_text: str

    def json(self) -> Any:
        try:
            return json.loads(self.body_text)
        except ValueError:
            return None


def http_request(
    method: str,
    url: str,
    payload: Optional[Dict[str, Any]] = None,
    body: Optional[bytes] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = 20,
) -> HttpResult:
    req_headers = {"Accept": "application/json"}
    if headers:
        req_headers.update(headers)

    data = body
    if payload is not None:
        data = json.dumps(payload).encode("utf-8")
        req_headers["Content-Type"] = "application/json"

    req = urllib.request.Request(url, data=data, method=method, headers=req_headers)

    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            text = resp.read().decode("utf-8", errors="replace")
            return HttpResult(status=resp.status, headers=dict(resp.headers.items()), body_text=text)
    except urllib.error.HTTPError as e:
        text = e.read().decode("utf-8", errors="replace") if e.fp else str(e)
        hdrs = dict(e.headers.items()) if e.headers else {}
        return HttpResult(status=e.code, headers=hdrs, body_text=text)
    except OSError as e:
        return HttpResult(status=0, headers={}, body_text=f"ERROR: {type(e).__name__}: {e}")


def multipart_body(fields: Dict[str, str], file_field: str, filename: str, content_type: str, content: bytes):
    boundary = uuid.uuid4().hex
    parts = []
    for name, value in fields.items():
        parts.append(
            f'--{boundary}\r\nContent-Disposition: form-data; name="{name}"\r\n\r\n{value}\r\n'.encode("utf-8")
        )
    parts.append(
        (
            f'--{boundary}\r\nContent-Disposition: form-data; name="{file_field}"; filename="{filename}"\r\n'
            f"Content-Type: {content_type}\r\n\r\n"
        ).encode("utf-8")
        + content
        + b"\r\n"
    )
    parts.append(f"--{boundary}--\r\n".encode("utf-8"))
    return b"".join(parts), f"multipart/form-data; boundary={boundary}"


def pretty_print_result(title: str, r: HttpResult) -> None:
    print(f"\n=== {title} ===")
    print(f"Status: {r.status}")
    obj = r.json()
    if obj is None:
        print(r.body_text[:2000])
    else:
        print(json.dumps(obj, indent=2, ensure_ascii=False)[:2000])


def main() -> int:
    base = os.getenv("MEDIA_API_URL", "http://localhost:8000").rstrip("/")
    print("Media API Smoke Test")
    print(f"API Base: {base}")

    # 1) Health
    r = http_request("GET", f"{base}/health")
    pretty_print_result("GET /health", r)
    if r.status == 0:
        print("\n❌ Backend is not reachable. Is uvicorn running?")
        return 2

    # 2) Catalog section
    r = http_request("GET", f"{base}/api/media?type=music&locale=ru")
    pretty_print_result("GET /api/media?type=music&locale=ru", r)

    # 3) Upload a tiny "photo"
    body, ctype = multipart_body(
        {"metadata": json.dumps({"title": "Smoke", "description": "smoke test", "year": "2024"})},
        "file",
        "smoke.png",
        "image/png",
        b"\x89PNG\r\n\x1a\n" + b"\x00" * 32,
    )
    r = http_request("POST", f"{base}/api/upload/photo", body=body, headers={"Content-Type": ctype})
    pretty_print_result("POST /api/upload/photo", r)
    uploaded = (r.json() or {}).get("data") or {}

    # 4) Record it, then remove the record again
    item = {"title": "Smoke", "description": "smoke test", "year": "2024", "src": uploaded.get("url", "")}
    r = http_request("POST", f"{base}/api/media", payload={"type": "photos", "locale": "en", "item": item})
    pretty_print_result("POST /api/media", r)
    item_id = ((r.json() or {}).get("data") or {}).get("id")

    if item_id:
        r = http_request("DELETE", f"{base}/api/media?type=photos&locale=en&id={item_id}")
        pretty_print_result("DELETE /api/media", r)

    # 5) Storage stats / orphans (the smoke upload is now an orphan)
    r = http_request("GET", f"{base}/api/admin/storage")
    pretty_print_result("GET /api/admin/storage", r)

    print("\n✅ Smoke test completed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
