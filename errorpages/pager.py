"""Error-page provider contract."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorPager(Protocol):
    """Provider of error page contents.

    One instance is shared by every request the middleware serves, so
    implementations must tolerate concurrent calls.
    """

    def get_error_page(self, data: bytes, status: int) -> bytes | None:
        """Return the page to send instead of `data` for HTTP `status`.

        `data` is the original error text produced by the wrapped app.
        An empty result (``b""`` or ``None``) keeps the original text.
        """
        ...
