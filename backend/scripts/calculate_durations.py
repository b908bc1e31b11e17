"""
Fills missing track durations ("M:SS") from the audio files with ffprobe.

Only tracks with a local `src` (served from the public root) are probed.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from app.core.config import settings
from app.services.catalog import CatalogService
from app.services.durations import AudioError, require_ffprobe, update_missing_durations


def main() -> int:
    ap = argparse.ArgumentParser(description="Calculate missing track durations.")
    ap.add_argument("--public-dir", default=None, help="Public root (default: PUBLIC_DIR)")
    ap.add_argument("--catalog", default=None, help="Catalog file (default: DATA_DIR/CATALOG_FILE)")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")

    try:
        require_ffprobe()
    except AudioError as e:
        print(f"❌ {e}")
        return 0

    public_root = Path(args.public_dir) if args.public_dir else settings.public_path
    catalog = CatalogService(args.catalog) if args.catalog else CatalogService()

    updated = update_missing_durations(catalog, public_root)
    print(f"✅ Duration calculation completed! Updated {updated} tracks.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
