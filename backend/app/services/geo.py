# backend/app/services/geo.py
from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


# Countries served the Russian site by default
POST_SOVIET_COUNTRIES = frozenset(
    {"RU", "BY", "KZ", "KG", "TJ", "TM", "UZ", "AM", "AZ", "GE", "MD", "UA"}
)

DEFAULT_COUNTRY = "US"
LOCAL_COUNTRY = "RU"

_COUNTRY_HEADERS = ("x-vercel-ip-country", "cf-ipcountry", "x-country-code")
_LOCAL_HOSTS = frozenset({"127.0.0.1", "::1", "localhost"})


def country_to_locale(country: Optional[str]) -> str:
    if country and country.upper() in POST_SOVIET_COUNTRIES:
        return "ru"
    return "en"


def country_from_headers(headers: Mapping[str, str]) -> Optional[str]:
    """Edge/CDN providers put the visitor's country in a header."""
    for name in _COUNTRY_HEADERS:
        value = headers.get(name)
        if value:
            return value.strip().upper()
    return None


def client_ip(headers: Mapping[str, str], peer: Optional[str]) -> str:
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return headers.get("x-real-ip") or peer or "127.0.0.1"


def is_local(ip: str) -> bool:
    return ip in _LOCAL_HOSTS


async def lookup_country(ip: str, client: httpx.AsyncClient | None = None) -> Optional[str]:
    """
    Asks the configured geo service for a 2-letter code.
    Returns None on any network problem or unexpected answer.
    """
    url = settings.geo_lookup_url.format(ip=ip)
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=settings.geo_timeout_sec)

    try:
        resp = await client.get(url, headers={"User-Agent": "terteryan-website/1.0"})
        if resp.status_code != 200:
            return None
        code = resp.text.strip()
        if len(code) == 2 and code.isalpha():
            return code.upper()
        return None
    except httpx.HTTPError as e:
        logger.info("Geo lookup for %s failed: %s", ip, e)
        return None
    finally:
        if owns_client:
            await client.aclose()


async def detect_country(headers: Mapping[str, str], peer: Optional[str]) -> str:
    country = country_from_headers(headers)
    if country:
        return country

    ip = client_ip(headers, peer)
    if is_local(ip):
        # Local development defaults to the Russian site
        return LOCAL_COUNTRY

    return await lookup_country(ip) or DEFAULT_COUNTRY
