# backend/app/services/storage.py
from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from app.models.media import COLLECTIONS, URL_FIELDS
from app.services.validator import UPLOAD_CONFIGS

_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def format_bytes(n: int) -> str:
    if n <= 0:
        return "0 Bytes"
    value = float(n)
    i = 0
    while value >= 1024 and i < len(_UNITS) - 1:
        value /= 1024
        i += 1
    return f"{round(value, 2):g} {_UNITS[i]}"


def uploaded_files(public_root: Path, category: str) -> Iterator[Path]:
    directory = public_root / UPLOAD_CONFIGS[category].directory / "original"
    if not directory.is_dir():
        return
    for path in sorted(directory.iterdir()):
        if path.is_file() and not path.name.startswith("."):
            yield path


def storage_stats(public_root: Path) -> dict[str, Any]:
    categories: dict[str, Any] = {}
    total_files = 0
    total_bytes = 0

    for category in UPLOAD_CONFIGS:
        files = list(uploaded_files(public_root, category))
        size = sum(p.stat().st_size for p in files)
        categories[category] = {"files": len(files), "bytes": size, "size": format_bytes(size)}
        total_files += len(files)
        total_bytes += size

    return {
        "categories": categories,
        "totalFiles": total_files,
        "totalBytes": total_bytes,
        "totalSize": format_bytes(total_bytes),
    }


# -------------------------
# Orphans
# -------------------------


def referenced_urls(catalog: dict[str, Any]) -> set[str]:
    """Every URL-valued field of every record, across both locales."""
    urls: set[str] = set()
    for locale_data in catalog.values():
        if not isinstance(locale_data, dict):
            continue
        for media_type, (key, _) in COLLECTIONS.items():
            section = locale_data.get(media_type)
            if not isinstance(section, dict):
                continue
            for record in section.get(key) or []:
                if not isinstance(record, dict):
                    continue
                for field in URL_FIELDS:
                    value = record.get(field)
                    if isinstance(value, str) and value:
                        urls.add(value)
    return urls


@dataclass(frozen=True)
class OrphanFile:
    path: Path
    url: str
    size: int
    age_hours: float


def find_orphans(
    public_root: Path,
    catalog: dict[str, Any],
    grace_hours: float,
    now: float | None = None,
) -> list[OrphanFile]:
    """
    Uploaded originals no record points at, older than `grace_hours`.
    The grace period leaves room for an upload whose record is still
    being composed in the admin UI.
    """
    now = time.time() if now is None else now
    referenced = referenced_urls(catalog)
    orphans: list[OrphanFile] = []

    for category, config in UPLOAD_CONFIGS.items():
        for path in uploaded_files(public_root, category):
            url = f"/{config.directory}/original/{path.name}"
            if url in referenced:
                continue
            stat = path.stat()
            age_hours = (now - stat.st_mtime) / 3600
            if age_hours < grace_hours:
                continue
            orphans.append(OrphanFile(path=path, url=url, size=stat.st_size, age_hours=age_hours))
    return orphans
