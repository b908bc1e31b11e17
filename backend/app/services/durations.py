# backend/app/services/durations.py
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional

from app.core.config import settings
from app.models.media import LOCALES
from app.services.catalog import CatalogService

logger = logging.getLogger(__name__)


class AudioError(RuntimeError):
    pass


def require_ffprobe() -> None:
    try:
        subprocess.run(["ffprobe", "-version"], check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise AudioError("ffprobe not found. Install ffmpeg to calculate durations.") from e


def probe_duration_sec(path: Path) -> float:
    cmd = [
        "ffprobe",
        "-v",
        "error",
        "-show_entries",
        "format=duration",
        "-of",
        "default=noprint_wrappers=1:nokey=1",
        str(path),
    ]
    out = _run(cmd)
    try:
        return float(out.strip())
    except ValueError as e:
        raise AudioError(f"ffprobe returned no duration for {path}") from e


def format_duration(seconds: float) -> str:
    """125.7 -> "2:05" """
    total = int(seconds)
    return f"{total // 60}:{total % 60:02d}"


def local_source(src: str, public_root: Path) -> Optional[Path]:
    """Catalog `src` values starting with "/" live under the public root."""
    if not src or src.startswith(("http://", "https://", "//")):
        return None
    return public_root / src.lstrip("/")


def update_missing_durations(
    catalog: CatalogService | None = None,
    public_root: Path | None = None,
    probe: Callable[[Path], float] = probe_duration_sec,
) -> int:
    """
    Fills `duration` for every track (both locales) that has a local `src`
    and no duration yet. Returns the number of tracks updated.
    """
    catalog = catalog or CatalogService()
    public_root = public_root or settings.public_path

    data = catalog.read()
    updated = 0

    for locale in LOCALES:
        for track in catalog.records(data, "music", locale):
            if not isinstance(track, dict) or track.get("duration") or not track.get("src"):
                continue

            path = local_source(track["src"], public_root)
            if path is None:
                logger.info("Skipping remote source for %s: %s", track.get("title"), track["src"])
                continue

            try:
                duration = format_duration(probe(path))
            except AudioError as e:
                logger.error("Error calculating duration for %s: %s", track.get("title"), e)
                continue

            track["duration"] = duration
            updated += 1
            logger.info("Updated duration for %s: %s", track.get("title"), duration)

    if updated:
        catalog.write(data)
    return updated


def _run(cmd: list[str]) -> str:
    try:
        p = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise AudioError(f"Command failed to start: {cmd[0]}") from e
    if p.returncode != 0:
        raise AudioError(f"Command failed: {' '.join(cmd)}\nSTDERR:\n{p.stderr}")
    return p.stdout
