"""Pure ASGI middleware installing ErrorWriter in front of the wrapped app."""
from __future__ import annotations

import logging

from starlette.types import ASGIApp, Receive, Scope, Send

from .pager import ErrorPager
from .writer import ErrorWriter

logger = logging.getLogger(__name__)


def _client_address(scope: Scope) -> str:
    client = scope.get("client")
    if not client:
        return "-"
    host, port = client
    return f"{host}:{port}"


class ErrorPageMiddleware:
    """Replace error response bodies with pages from `pager`.

    Each HTTP request gets its own ErrorWriter; the pager is shared. An
    exception escaping the wrapped app (or the pager) is logged with the
    client address and the request is abandoned, so one failing request
    never takes the server down.
    """

    def __init__(self, app: ASGIApp, pager: ErrorPager | None = None) -> None:
        self.app = app
        self.pager = pager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        writer = ErrorWriter(send, self.pager)
        try:
            await self.app(scope, receive, writer)
        except Exception as exc:
            logger.exception("[%s] caught exception: %s", _client_address(scope), exc)


def wrap(app: ASGIApp, pager: ErrorPager | None = None) -> ASGIApp:
    """Return `app` wrapped with error page handling.

    The result is installed in place of `app`, e.g. passed to uvicorn.
    """
    return ErrorPageMiddleware(app, pager)
