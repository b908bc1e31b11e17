from __future__ import annotations

from fastapi import APIRouter

from app.core.config import settings
from app.services.catalog import CatalogService
from app.services.storage import find_orphans, storage_stats

router = APIRouter()


@router.get("/storage")
def storage():
    return {"success": True, "data": storage_stats(settings.public_path)}


@router.get("/orphans")
def orphans():
    """
    Uploaded originals that no catalog record references (read-only report;
    `scripts/sweep_orphans.py --delete` removes them).
    """
    found = find_orphans(
        settings.public_path,
        CatalogService().read(),
        grace_hours=settings.orphan_grace_hours,
    )
    return {
        "success": True,
        "data": [
            {"url": o.url, "size": o.size, "ageHours": round(o.age_hours, 1)}
            for o in found
        ],
    }
