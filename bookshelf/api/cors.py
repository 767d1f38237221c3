"""Cross-origin response headers applied to every books API response."""

from __future__ import annotations

from fastapi import Response

from bookshelf.api.api_config import ApiConfig

JSON_CONTENT_TYPE = "application/json"


def cross_origin_headers(config: ApiConfig) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": config.cors_allow_origin,
        "Content-Type": JSON_CONTENT_TYPE,
        "Access-Control-Allow-Methods": ", ".join(config.cors_allow_methods),
        "Access-Control-Allow-Headers": ", ".join(config.cors_allow_headers),
    }


def apply_cross_origin_headers(response: Response, config: ApiConfig) -> Response:
    """Overwrite the CORS and content-type headers on `response` in place."""

    for name, value in cross_origin_headers(config).items():
        response.headers[name] = value
    return response
