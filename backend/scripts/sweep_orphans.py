"""
Finds uploaded originals that no catalog record references.

Dry run by default; pass --delete to remove them.
"""
from __future__ import annotations

import argparse
from pathlib import Path

from app.core.config import settings
from app.services.catalog import CatalogService
from app.services.storage import find_orphans, format_bytes


def main() -> int:
    ap = argparse.ArgumentParser(description="Report (or delete) orphaned uploads.")
    ap.add_argument("--public-dir", default=None, help="Public root (default: PUBLIC_DIR)")
    ap.add_argument(
        "--grace-hours",
        type=float,
        default=settings.orphan_grace_hours,
        help="Ignore files younger than this",
    )
    ap.add_argument("--delete", action="store_true", help="Delete the orphaned files")
    args = ap.parse_args()

    public_root = Path(args.public_dir) if args.public_dir else settings.public_path
    orphans = find_orphans(public_root, CatalogService().read(), grace_hours=args.grace_hours)

    if not orphans:
        print("✅ No orphaned uploads.")
        return 0

    total = sum(o.size for o in orphans)
    print(f"🔍 {len(orphans)} orphaned uploads ({format_bytes(total)}):")
    for o in orphans:
        print(f"  {o.url}  {format_bytes(o.size)}  {o.age_hours:.1f}h old")

    if not args.delete:
        print("ℹ️ Dry run. Re-run with --delete to remove them.")
        return 0

    removed = 0
    for o in orphans:
        try:
            o.path.unlink()
            removed += 1
        except OSError as e:
            print(f"❌ Failed to delete {o.url}: {e}")

    print(f"🗑️  Deleted {removed}/{len(orphans)} files")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
