from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.models.api import GeoResponse
from app.services.geo import DEFAULT_COUNTRY, country_to_locale, detect_country

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=GeoResponse)
async def geo(request: Request):
    """
    Best-effort visitor country, used to pick the initial site language.
    Always answers with some country; failures fall back to US.
    """
    peer = request.client.host if request.client else None
    try:
        country = await detect_country(request.headers, peer)
    except Exception:
        logger.exception("Geo detection error")
        return JSONResponse(
            {"country": DEFAULT_COUNTRY, "locale": country_to_locale(DEFAULT_COUNTRY)},
            status_code=500,
        )
    return GeoResponse(country=country, locale=country_to_locale(country))
