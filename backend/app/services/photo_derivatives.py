# backend/app/services/photo_derivatives.py
"""
Derived photo sizes (thumbnails/medium/large).

There is no resizing here: the derived directories are filled with copies
of the originals, or blanked to reclaim space.
"""
from __future__ import annotations

import logging
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DERIVED_DIRS = ("thumbnails", "medium", "large")
KEEP_FILE = ".gitkeep"

_IMAGE_RE = re.compile(r"\.(jpg|jpeg|png|webp)$", re.IGNORECASE)


@dataclass
class DerivedReport:
    processed: int = 0
    failed: list[str] = field(default_factory=list)
    missing_dirs: list[str] = field(default_factory=list)


def photos_root(public_root: Path) -> Path:
    return public_root / "photos"


def original_photos(public_root: Path) -> list[Path]:
    original_dir = photos_root(public_root) / "original"
    if not original_dir.is_dir():
        return []
    return sorted(p for p in original_dir.iterdir() if p.is_file() and _IMAGE_RE.search(p.name))


def cleanup_derived(public_root: Path) -> DerivedReport:
    """Truncates every file in the derived directories except .gitkeep."""
    report = DerivedReport()
    for name in DERIVED_DIRS:
        directory = photos_root(public_root) / name
        if not directory.is_dir():
            report.missing_dirs.append(name)
            continue

        for path in sorted(directory.iterdir()):
            if path.name == KEEP_FILE or not path.is_file():
                continue
            try:
                path.write_bytes(b"")
                report.processed += 1
            except OSError as e:
                logger.error("Failed to clear %s: %s", path, e)
                report.failed.append(str(path))
    return report


def fix_thumbnails(public_root: Path) -> DerivedReport:
    """Copies originals over thumbnails that are missing or empty."""
    report = DerivedReport()
    thumbs = photos_root(public_root) / "thumbnails"
    thumbs.mkdir(parents=True, exist_ok=True)

    for original in original_photos(public_root):
        target = thumbs / original.name
        if target.exists() and target.stat().st_size > 0:
            continue
        try:
            shutil.copyfile(original, target)
            report.processed += 1
        except OSError as e:
            logger.error("Failed to copy %s: %s", original.name, e)
            report.failed.append(original.name)
    return report


def generate_derived(public_root: Path) -> DerivedReport:
    """Copies each original into every derived directory where it is absent."""
    report = DerivedReport()
    root = photos_root(public_root)
    for name in DERIVED_DIRS:
        (root / name).mkdir(parents=True, exist_ok=True)

    for original in original_photos(public_root):
        ok = True
        for name in DERIVED_DIRS:
            target = root / name / original.name
            if target.exists():
                continue
            try:
                shutil.copyfile(original, target)
            except OSError as e:
                logger.error("Failed to copy %s to %s: %s", original.name, name, e)
                ok = False
        if ok:
            report.processed += 1
        else:
            report.failed.append(original.name)
    return report
