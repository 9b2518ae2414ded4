"""Error page handling for ASGI applications."""
from .middleware import ErrorPageMiddleware, wrap
from .pager import ErrorPager
from .pages import PassThroughPager, StatusPagePager
from .writer import HTML_CONTENT_TYPE, ErrorWriter

__all__ = [
    "HTML_CONTENT_TYPE",
    "ErrorPageMiddleware",
    "ErrorPager",
    "ErrorWriter",
    "PassThroughPager",
    "StatusPagePager",
    "wrap",
]
