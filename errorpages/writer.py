"""ASGI `send` wrapper that swaps error bodies for pages from an ErrorPager."""
from __future__ import annotations

import logging

from starlette.datastructures import MutableHeaders
from starlette.types import Message, Send

from .pager import ErrorPager

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
STATUS_OK = 200
STATUS_UNSET = 0


def body_allowed(status: int) -> bool:
    """Whether HTTP permits a response body for `status`."""
    return not (100 <= status < 200 or status in (204, 304))


class ErrorWriter:
    """Response sink for one HTTP request with error page handling.

    Forwards every message to the wrapped `send`; only the response start
    and body messages are looked at.
    """

    def __init__(self, send: Send, pager: ErrorPager | None = None) -> None:
        self.send = send
        self.pager = pager
        self.status = STATUS_UNSET
        self.body_sent = False

    async def __call__(self, message: Message) -> None:
        message_type = message["type"]
        if message_type == "http.response.start":
            await self.write_header(message)
        elif message_type == "http.response.body":
            await self.write(message)
        else:
            await self.send(message)

    async def write_header(self, message: Message) -> None:
        """Record the status and send the response start message."""
        self.status = message["status"]
        if self.status != STATUS_OK and self.pager is not None:
            # Error bodies are usually plain text, but the pager returns HTML.
            # Headers can't be touched once the start message is out.
            message.setdefault("headers", [])
            headers = MutableHeaders(scope=message)
            headers["content-type"] = HTML_CONTENT_TYPE
            # The page has its own length; the server frames it instead.
            if "content-length" in headers:
                del headers["content-length"]
        await self.send(message)

    async def write(self, message: Message) -> None:
        """Send one body chunk, replaced by the pager's page on error status."""
        if self.status == STATUS_UNSET:
            self.status = STATUS_OK
        data = message.get("body", b"")
        closing = not data and not message.get("more_body", False)
        substitute = self.status != STATUS_OK and self.pager is not None and body_allowed(self.status)
        if substitute and not (closing and self.body_sent):
            page = self.pager.get_error_page(data, self.status)
            if page:
                logger.debug(
                    "Replacing %d byte error body with %d byte page (status %d)",
                    len(data),
                    len(page),
                    self.status,
                )
                message = {**message, "body": page}
        self.body_sent = True
        await self.send(message)
