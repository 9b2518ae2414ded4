"""Demo application serving through the error page middleware."""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from starlette.types import ASGIApp

from .config import Settings, get_settings
from .middleware import wrap

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> ASGIApp:
    """Build the demo FastAPI app, wrapped with the configured pager."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Error Pages Demo",
        version="1.0.0",
        description="Plain handlers whose error responses are replaced by HTML pages",
    )

    @app.get("/", response_class=PlainTextResponse)
    def hello():
        """Dummy handler for demonstration purposes."""
        return "Hello world!"

    @app.get("/missing")
    def missing():
        raise HTTPException(status_code=404, detail="Nothing here")

    @app.get("/boom")
    def boom():
        raise RuntimeError("demo failure")

    @app.get("/api/v1/system/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok", "pager": settings.PAGER}

    return wrap(app, settings.build_pager())


def main() -> None:
    """Run the demo server with uvicorn."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving error page demo on %s:%d (pager=%s)", settings.HOST, settings.PORT, settings.PAGER)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
