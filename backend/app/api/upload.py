from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.core.errors import NotFoundError, ValidationError
from app.services.upload import UploadPipeline, parse_metadata
from app.services.validator import UPLOAD_CONFIGS

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _pipeline(category: str) -> UploadPipeline:
    if category not in UPLOAD_CONFIGS:
        raise NotFoundError(f"Unknown upload category: {category}")
    return UploadPipeline(category)


@router.post("/{category}")
async def upload_file(
    category: str,
    file: Optional[UploadFile] = File(default=None),
    metadata: Optional[str] = Form(default=None),
):
    """
    Multipart upload: `file` plus `metadata` (a JSON string).

    Required metadata is checked before the file is read, so a rejected
    request never leaves anything on disk. The response describes the stored
    file; creating the catalog record is a separate POST /api/media.
    """
    pipeline = _pipeline(category)

    if file is None:
        raise ValidationError("No file provided")

    meta = parse_metadata(metadata)
    pipeline.check_metadata(meta)

    data = await file.read()
    descriptor = await run_in_threadpool(
        pipeline.run, file.filename or "", file.content_type, data, meta
    )

    return JSONResponse(
        {"success": True, "data": descriptor.model_dump()},
        headers=CORS_HEADERS,
    )


@router.options("/{category}")
def upload_preflight(category: str):
    _pipeline(category)
    return JSONResponse({}, headers=CORS_HEADERS)
