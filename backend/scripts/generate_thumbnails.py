"""
Fills photos/{thumbnails,medium,large} from photos/original.

Files are copied as-is; no resizing is done.
"""
from __future__ import annotations

import argparse
from pathlib import Path

from app.core.config import settings
from app.services.photo_derivatives import generate_derived, original_photos


def main() -> int:
    ap = argparse.ArgumentParser(description="Populate derived photo directories.")
    ap.add_argument("--public-dir", default=None, help="Public root (default: PUBLIC_DIR)")
    args = ap.parse_args()

    public_root = Path(args.public_dir) if args.public_dir else settings.public_path
    originals = original_photos(public_root)

    if not originals:
        print("❌ No photos found in original directory")
        return 0

    print(f"📸 Found {len(originals)} photos to process")
    report = generate_derived(public_root)

    print(f"✓ {report.processed}/{len(originals)} photos processed successfully")
    if report.failed:
        print(f"❌ {len(report.failed)} photos failed to process: {', '.join(report.failed)}")
    print("📝 Note: derived files are plain copies of the originals.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
