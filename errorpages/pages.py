"""Stock ErrorPager implementations."""
from __future__ import annotations

from html import escape
from http import HTTPStatus

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{status} {title}</title>
</head>
<body>
<h1>{status} {title}</h1>
<p>{detail}</p>
</body>
</html>
"""


class PassThroughPager:
    """Return the original error text unchanged."""

    def get_error_page(self, data: bytes, status: int) -> bytes | None:
        return data


class StatusPagePager:
    """Render a minimal HTML page titled with the HTTP reason phrase."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def get_error_page(self, data: bytes, status: int) -> bytes | None:
        try:
            title = HTTPStatus(status).phrase
        except ValueError:
            title = "Error"

        detail = data.decode(self.encoding, errors="replace").strip()
        page = _PAGE_TEMPLATE.format(
            status=status,
            title=escape(title),
            detail=escape(detail or title),
        )
        return page.encode("utf-8")
