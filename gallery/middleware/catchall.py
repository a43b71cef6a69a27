"""Last-resort handler so one failing request never takes the process down."""
from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

logger = logging.getLogger(__name__)


class CatchAllExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error("%s on %s %s (500): %s", type(exc).__name__, request.method, request.url.path, exc, exc_info=True)
            return PlainTextResponse("Server Error", status_code=500)


__all__ = ["CatchAllExceptionMiddleware"]
