"""Let HTML forms issue DELETE through a ``_method`` query parameter."""
from __future__ import annotations

import logging

from starlette.datastructures import QueryParams
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

OVERRIDABLE_METHODS = frozenset({"DELETE"})


class MethodOverrideMiddleware:
    """Rewrite ``POST /path?_method=DELETE`` to ``DELETE /path`` before routing."""

    def __init__(self, app: ASGIApp, *, param_name: str = "_method") -> None:
        self.app = app
        self.param_name = param_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            override = QueryParams(scope.get("query_string", b"")).get(self.param_name, "").upper()
            if override in OVERRIDABLE_METHODS:
                logger.debug("Overriding POST %s as %s", scope.get("path"), override)
                scope = dict(scope)
                scope["method"] = override
        await self.app(scope, receive, send)


__all__ = ["MethodOverrideMiddleware", "OVERRIDABLE_METHODS"]
