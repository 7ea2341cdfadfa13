from typing import Mapping

from httpx import Headers

from .constants import CONTENT_TYPE_JSON, HEADER_API_KEY, HEADER_CONTENT_TYPE

MASK = "***"


def default_headers(api_key: str) -> dict[str, str]:
    return {
        HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
        HEADER_API_KEY: api_key,
    }


def merge_headers(api_key: str, custom_headers: Mapping[str, str] | None) -> Headers:
    """Combine the mandatory Data API headers with per-request headers.

    Custom headers are applied last and header names compare case-insensitively,
    so ``content-type`` replaces the default ``Content-Type`` instead of being
    sent alongside it.
    """
    headers = Headers(default_headers(api_key))
    headers.update(custom_headers or {})
    return headers


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` that is safe to log."""
    return {
        name: MASK if name.lower() == HEADER_API_KEY else value
        for name, value in headers.items()
    }
