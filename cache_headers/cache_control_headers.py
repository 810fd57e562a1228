"""Cache-Control header for API-tjenester."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from cache_headers.cache_policy import (
    DEFAULT_CONFIG,
    CacheControlConfig,
    resolve_cache_control,
)

logger = logging.getLogger(__name__)

CACHE_CONTROL_HEADER = "Cache-Control"


class CacheControlMiddleware(BaseHTTPMiddleware):
    """
    Setter Cache-Control på responser som ikke har headeren fra før.

    En verdi satt av en handler eller av middleware lenger inn blir aldri
    overskrevet. Exceptions fra den indre appen fanges ikke.
    """

    def __init__(
        self, app: ASGIApp, config: Optional[CacheControlConfig] = None
    ) -> None:
        super().__init__(app)
        self.config = config if config is not None else DEFAULT_CONFIG

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        existing = response.headers.get(CACHE_CONTROL_HEADER)
        if existing is not None:
            logger.debug(
                f"Keeping existing Cache-Control '{existing}' for {request.url.path}"
            )
            return response

        # Several request lines count as one comma separated list
        request_directive = ", ".join(request.headers.getlist(CACHE_CONTROL_HEADER))
        value = resolve_cache_control(
            response.status_code,
            self.config,
            request_directive=request_directive or None,
        )
        response.headers[CACHE_CONTROL_HEADER] = value
        logger.debug(
            f"Set Cache-Control '{value}' on {response.status_code} {request.url.path}"
        )
        return response


def setup_cache_control(
    app: FastAPI, config: Optional[CacheControlConfig] = None
) -> None:
    """Legg til Cache-Control header basert på statuskode."""
    app.add_middleware(CacheControlMiddleware, config=config)
