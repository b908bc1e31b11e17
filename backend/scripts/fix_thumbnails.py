"""
Copies original photos over thumbnails that are missing or empty.
"""
from __future__ import annotations

import argparse
from pathlib import Path

from app.core.config import settings
from app.services.photo_derivatives import fix_thumbnails, original_photos


def main() -> int:
    ap = argparse.ArgumentParser(description="Restore empty or missing photo thumbnails.")
    ap.add_argument("--public-dir", default=None, help="Public root (default: PUBLIC_DIR)")
    args = ap.parse_args()

    public_root = Path(args.public_dir) if args.public_dir else settings.public_path

    print("🔧 Fixing empty thumbnail files...")
    print(f"Found {len(original_photos(public_root))} original photos")

    report = fix_thumbnails(public_root)
    for name in report.failed:
        print(f"❌ Failed to copy {name}")

    print(f"✅ Fixed {report.processed} thumbnail files")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
