"""
Writes the built-in catalog to DATA_DIR/CATALOG_FILE.

Usage (from repo root):
  python backend/scripts/seed_catalog.py [--force]
"""
from __future__ import annotations

import argparse

from app.core.config import settings
from app.services.catalog import CatalogService, default_catalog


def main() -> int:
    ap = argparse.ArgumentParser(description="Seed the media catalog with the built-in content.")
    ap.add_argument("--force", action="store_true", help="Overwrite an existing catalog file")
    args = ap.parse_args()

    path = settings.catalog_path
    print(f"🌱 Seeding catalog: {path}")

    if path.exists() and not args.force:
        print("ℹ️ Catalog already exists, nothing to do (use --force to overwrite).")
        return 0

    data = default_catalog()
    CatalogService(path).write(data)

    for locale, sections in data.items():
        counts = ", ".join(
            f"{name}={len(section.get('tracks') or section.get('items') or [])}"
            for name, section in sections.items()
        )
        print(f"  {locale}: {counts}")

    print("✅ Success!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
