"""Classify the client platform of an inbound request from its headers.

Mobile clients identify themselves with ``x-platform: mobile`` or, for older
builds, ``x-client-type: mobile``. Everything else is treated as web.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Literal

from fastapi import Request

from ..core.config import get_settings


logger = logging.getLogger(__name__)

Platform = Literal["mobile", "web"]
HeaderValue = str | Sequence[str] | None


def _header_value(headers: Mapping[str, HeaderValue], name: str) -> HeaderValue:
    # Starlette collapses repeated headers in .get(); keep them visible.
    getlist = getattr(headers, "getlist", None)
    if getlist is None:
        return headers.get(name)
    values = getlist(name)
    if not values:
        return None
    if len(values) > 1:
        return list(values)
    return values[0]


def is_mobile_app(request: Request) -> bool:
    """Return True when the request comes from the mobile app.

    ``x-platform`` wins over ``x-client-type``; an empty value falls through to
    the next header. Only a single value equal to ``mobile`` (any casing)
    counts. Repeated headers are never treated as mobile.
    """
    settings = get_settings()
    headers = request.headers
    value = _header_value(headers, settings.platform_header) or _header_value(
        headers, settings.client_type_header
    )
    if not isinstance(value, str):
        if value:
            logger.debug(
                "platform.repeated_header",
                extra={"values": list(value)},
            )
        return False
    return value.lower() == settings.mobile_token.lower()


def get_platform(request: Request) -> Platform:
    return "mobile" if is_mobile_app(request) else "web"


__all__ = ["Platform", "get_platform", "is_mobile_app"]
