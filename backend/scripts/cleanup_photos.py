"""
Blanks derived photo files (thumbnails/medium/large) to reclaim space.
Originals in photos/original/ and .gitkeep files are left alone.
"""
from __future__ import annotations

import argparse
from pathlib import Path

from app.core.config import settings
from app.services.photo_derivatives import DERIVED_DIRS, cleanup_derived


def main() -> int:
    ap = argparse.ArgumentParser(description="Clear derived photo files.")
    ap.add_argument("--public-dir", default=None, help="Public root (default: PUBLIC_DIR)")
    args = ap.parse_args()

    public_root = Path(args.public_dir) if args.public_dir else settings.public_path

    print("🧹 Starting photo cleanup...")
    report = cleanup_derived(public_root)

    for name in report.missing_dirs:
        print(f"⚠️  Directory not found: photos/{name}")
    for path in report.failed:
        print(f"❌ Failed to clear {path}")

    print(f"✅ Cleared {report.processed} files from {', '.join(DERIVED_DIRS)}")
    print("📂 Original photos in photos/original/ are preserved.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
