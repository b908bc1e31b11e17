from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.errors import AppError
from app.admin.storage import router as admin_router
from app.api.geo import router as geo_router
from app.api.media import router as media_router
from app.api.upload import CORS_HEADERS as UPLOAD_CORS_HEADERS
from app.api.upload import router as upload_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Terteryan Media API", version="1.0.0")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==============================================================================
# ERRORS -> {success: false, error}
# ==============================================================================


# Upload responses carry the same CORS headers on success and on error
def _error_response(request: Request, status_code: int, error: str) -> JSONResponse:
    headers = UPLOAD_CORS_HEADERS if request.url.path.startswith("/api/upload/") else None
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
        headers=headers,
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return _error_response(request, exc.status_code, exc.detail)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
    return _error_response(request, 400, f"Invalid request: {', '.join(fields)}")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(request, 500, "Internal server error")


# Routers
app.include_router(media_router, prefix="/api/media", tags=["media"])
app.include_router(upload_router, prefix="/api/upload", tags=["upload"])
app.include_router(geo_router, prefix="/api/geo", tags=["geo"])
app.include_router(admin_router, prefix="/api/admin", tags=["admin"])


@app.get("/health")
def health():
    return {"ok": True, "service": "terteryan-media", "env": settings.env}


# Uploaded files (/photos/original/..., /audio/original/...) and other
# public assets. Mounted last so the API routes above take precedence.
# The directory must exist before StaticFiles serves from it.
settings.public_path.mkdir(parents=True, exist_ok=True)
app.mount("/", StaticFiles(directory=settings.public_dir), name="public")
